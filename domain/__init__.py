"""
Domain layer: Builder logic with minimal external dependencies.

Contains:
- labels / rewrite: nested configuration objects embedded by the builders
- content_type / taxonomy: validating fluent builders and reserved-name registries
- schemas: Pydantic models for the registration records
- host: the registration interface the builders hand their records to
"""

from domain.content_type import RESERVED_CONTENT_TYPES, ContentType, ReservedContentTypes
from domain.exceptions import (
    BuilderError,
    HostNotConfiguredError,
    IdentifierTooLongError,
    RegistrationConflictError,
    ReservedIdentifierError,
)
from domain.host import (
    Registrable,
    RegistrationHost,
    get_default_host,
    reset_default_host,
    set_default_host,
)
from domain.labels import LABEL_KEYS, Labels, Translator
from domain.rewrite import Rewrite
from domain.schemas import ContentTypeArgs, TaxonomyArgs
from domain.taxonomy import RESERVED_TERMS, ReservedTerms, Taxonomy

__all__ = [
    # Builders
    "ContentType",
    "Taxonomy",
    # Nested configuration
    "Labels",
    "LABEL_KEYS",
    "Translator",
    "Rewrite",
    # Records
    "ContentTypeArgs",
    "TaxonomyArgs",
    # Reserved names
    "RESERVED_CONTENT_TYPES",
    "ReservedContentTypes",
    "RESERVED_TERMS",
    "ReservedTerms",
    # Host interface
    "Registrable",
    "RegistrationHost",
    "get_default_host",
    "set_default_host",
    "reset_default_host",
    # Errors
    "BuilderError",
    "ReservedIdentifierError",
    "IdentifierTooLongError",
    "HostNotConfiguredError",
    "RegistrationConflictError",
]
