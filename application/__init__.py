"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
turning a declarations file into builders and handing them to a host.
"""

from application.registration import (
    RegistrationSummary,
    build_content_type,
    build_labels,
    build_rewrite,
    build_taxonomy,
    register_declarations,
)

__all__ = [
    # Main workflow
    "register_declarations",
    "RegistrationSummary",
    # Builder factories
    "build_content_type",
    "build_taxonomy",
    "build_labels",
    "build_rewrite",
]
