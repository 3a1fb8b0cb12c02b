"""Application-level constants."""

from pathlib import Path

# Output filenames
MANIFEST_FILENAME = "manifest.json"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
SUMMARY_FILENAME = "summary.json"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "run.log"
