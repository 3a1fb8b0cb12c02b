"""Registration interface consumed by the builders."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from domain.exceptions import HostNotConfiguredError


class RegistrationHost(ABC):
    """
    The host platform's registration calls.

    Implementations may raise their own errors (identifier collision, malformed
    record); builders let those propagate unchanged.
    """

    @abstractmethod
    def register_content_type(self, identifier: str, record: Mapping[str, Any]) -> None:
        raise NotImplementedError

    @abstractmethod
    def register_taxonomy(
        self,
        identifier: str,
        content_types: str | Sequence[str],
        record: Mapping[str, Any],
    ) -> None:
        raise NotImplementedError


class Registrable(ABC):
    """Anything that can hand itself to a host: content types and taxonomies."""

    @abstractmethod
    def register(self, host: RegistrationHost | None = None) -> None:
        raise NotImplementedError


# Process-wide host used by register() when no host is passed
_default_host: RegistrationHost | None = None


def set_default_host(host: RegistrationHost) -> None:
    global _default_host
    _default_host = host


def reset_default_host() -> None:
    global _default_host
    _default_host = None


def get_default_host() -> RegistrationHost:
    if _default_host is None:
        raise HostNotConfiguredError(
            "No registration host configured. Pass a host to register() or call set_default_host() first."
        )
    return _default_host


def resolve_host(host: RegistrationHost | None) -> RegistrationHost:
    return host if host is not None else get_default_host()
