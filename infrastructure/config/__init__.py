"""
Configuration management: models, loading, and validation.

Handles:
- RunConfig: Main registration run configuration
- Content type and taxonomy declarations
- Label and rewrite overrides
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_run_config, parse_run_config
from infrastructure.config.models import (
    # Declarations
    ContentTypeDeclaration,
    ContentTypeOptions,
    # Enums
    HostKind,
    # Nested configuration
    LabelsConfig,
    RewriteConfig,
    # Main config
    RunConfig,
    TaxonomyDeclaration,
    TaxonomyOptions,
)

__all__ = [
    # Main config (most commonly used)
    "RunConfig",
    "load_run_config",
    "parse_run_config",
    # Enums
    "HostKind",
    # Declarations
    "ContentTypeDeclaration",
    "ContentTypeOptions",
    "TaxonomyDeclaration",
    "TaxonomyOptions",
    # Nested configuration
    "LabelsConfig",
    "RewriteConfig",
]
