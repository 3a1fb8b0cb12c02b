"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Registration hosts (in-memory, JSON manifest)
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    HostKind,
    RunConfig,
    load_run_config,
)
from infrastructure.hosts import HostAdapter, make_host

__all__ = [
    # Registration hosts (most commonly used)
    "make_host",
    "HostAdapter",
    # Configuration (most commonly used)
    "load_run_config",
    "RunConfig",
    "HostKind",
]
