"""
Content type builder and the reserved content type names.

All functions in this module are pure (no I/O).
"""

from domain.content_type.builder import MAX_CONTENT_TYPE_LENGTH, ContentType
from domain.content_type.reserved import RESERVED_CONTENT_TYPES, ReservedContentTypes

__all__ = [
    "ContentType",
    "MAX_CONTENT_TYPE_LENGTH",
    "RESERVED_CONTENT_TYPES",
    "ReservedContentTypes",
]
