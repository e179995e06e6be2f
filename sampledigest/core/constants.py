"""Fixed sizes shared by every hashing mode."""

# Length in bytes of every identifier.
SIZE = 16

# Inputs smaller than 128 KB are hashed in their entirety.
SAMPLE_THRESHOLD = 128 * 1024
SAMPLE_SIZE = 16 * 1024
