"""Version information for sampledigest."""

__version__ = "0.1.0"
