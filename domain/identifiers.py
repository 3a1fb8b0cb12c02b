"""Identifier validation shared by the builders."""

from collections.abc import Iterable

from domain.exceptions import IdentifierTooLongError, ReservedIdentifierError


def validate_identifier(identifier: str, *, reserved: Iterable[str], max_length: int, kind: str) -> str:
    """
    Check an identifier against a reserved-name list and a length limit.

    Reserved names are checked first, so a reserved name is always reported as
    such even when it is also too long.

    Raises:
        ReservedIdentifierError: If identifier is one of the reserved names
        IdentifierTooLongError: If identifier is longer than max_length
    """
    if identifier in reserved:
        raise ReservedIdentifierError(identifier, kind)
    if len(identifier) > max_length:
        raise IdentifierTooLongError(identifier, kind, max_length)
    return identifier
