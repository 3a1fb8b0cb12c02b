"""Lookup table from HostKind to the adapter class implementing it."""

import logging

from infrastructure.config.models import HostKind

from .base import HostAdapter

logger = logging.getLogger(__name__)

_HOSTS: dict[HostKind, type[HostAdapter]] = {}


def register_host(kind: HostKind, host_cls: type[HostAdapter], *, override: bool = False) -> None:
    """Bind host_cls to kind. Host modules call this when they are imported."""
    bound = _HOSTS.get(kind)
    if bound is not None and bound is not host_cls and not override:
        raise RuntimeError(f"Host kind {kind.value!r} is already registered to {bound.__name__}")
    _HOSTS[kind] = host_cls
    logger.debug("Host kind %s -> %s", kind.value, host_cls.__name__)


def get_host_class(kind: HostKind) -> type[HostAdapter] | None:
    return _HOSTS.get(kind)
