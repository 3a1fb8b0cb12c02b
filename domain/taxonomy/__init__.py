"""
Taxonomy builder and the reserved taxonomy terms.

All functions in this module are pure (no I/O).
"""

from domain.taxonomy.builder import MAX_TAXONOMY_LENGTH, Taxonomy
from domain.taxonomy.reserved import RESERVED_TERMS, ReservedTerms

__all__ = [
    "Taxonomy",
    "MAX_TAXONOMY_LENGTH",
    "RESERVED_TERMS",
    "ReservedTerms",
]
