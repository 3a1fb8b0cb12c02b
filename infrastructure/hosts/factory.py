"""Factory for creating registration hosts."""

import importlib
import logging

from infrastructure.config.models import HostKind, RunConfig

from .base import HostAdapter
from .registry import get_host_class

logger = logging.getLogger(__name__)


def _ensure_host_imported(kind: HostKind) -> None:
    """
    Lazy-import the host module to trigger `register_host(...)`.

    Convention:
      - HostKind value MUST match module filename under infrastructure/hosts/
        e.g., HostKind.MANIFEST.value == "manifest" -> infrastructure/hosts/manifest.py
    """
    module_name = f"{__package__}.{kind.value}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(
                f"No host module found for host='{kind.value}'. Expected file: infrastructure/hosts/{kind.value}.py"
            ) from e
        raise


def make_host(cfg: RunConfig) -> HostAdapter:
    """
    Factory function to create the registration host selected in the config.
    Args:
        cfg: Run configuration containing the host kind
    Returns:
        An instance of HostAdapter for the configured kind.
    Raises:
        RuntimeError: If the host kind is unsupported.
    """
    # 1) Try registry first (maybe already imported elsewhere)
    host_cls = get_host_class(cfg.host)

    # 2) If not registered yet, import the host module by convention, then retry
    if host_cls is None:
        _ensure_host_imported(cfg.host)
        host_cls = get_host_class(cfg.host)

    if host_cls is None:
        raise RuntimeError(
            f"Host '{cfg.host.value}' did not register an adapter. "
            f"Make sure {cfg.host.value}.py calls register_host(...)."
        )

    logger.debug("Creating host %s (override=%s)", host_cls.__name__, cfg.override)
    return host_cls.from_cfg(cfg)
