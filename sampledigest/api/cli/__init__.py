"""Command-line interface for sampledigest."""
