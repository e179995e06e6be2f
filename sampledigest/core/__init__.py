"""Core hashing components: constants, mixer, byte sources and configuration."""
