"""Resource files and configuration templates."""


def get_default_config() -> str:
    """Return default configuration YAML content."""
    return """# matelink Configuration File

# Input files (can be overridden by CLI arguments)
bam: ~
index: ~
references: ~
# Edge list destination; ~ writes to stdout
output: ~

# Linkage parameters
link:
  # Drop edges supported by fewer pairs (negative disables)
  lower: 3
  # Drop edges supported by more pairs (negative disables)
  upper: -1
  # Terminal window size, also the end-classification threshold
  window_length: 500

# Runtime settings
runtime:
  log_level: "WARNING"
  log_file: ~
  enable_progress: true
  # Warn and skip listed contigs missing from the BAM header instead of failing
  skip_missing: false

# Performance settings
performance:
  # BGZF decompression threads
  threads: 1
"""
