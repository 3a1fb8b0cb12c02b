from pathlib import Path

# Repo-root conventional directories/files (overrideable on the command line)
CONFIG_DIR = Path("configs")
DECLARATIONS_FILE = CONFIG_DIR / "registrations.yaml"

# Environment variable overriding the declared registration host
HOST_ENV_VAR = "BUILDERS_HOST"
