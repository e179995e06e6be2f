"""User-facing interfaces for sampledigest."""
