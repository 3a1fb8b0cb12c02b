"""Registration host that exports every record to a JSON manifest."""

import json
import logging
from pathlib import Path
from typing import Any

from infrastructure.config.models import HostKind

from .base import HostAdapter
from .registry import register_host

logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    # Callbacks cannot be serialized; record them by qualified name
    if callable(value):
        module = getattr(value, "__module__", None)
        name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None) or repr(value)
        return f"{module}.{name}" if module else name
    return str(value)


class ManifestHost(HostAdapter):
    """
    Collects registrations and writes them as a JSON manifest.

    The manifest is meant to be consumed by the host platform's bootstrap,
    which performs the actual registration calls in declaration order.
    """

    kind = HostKind.MANIFEST

    def to_manifest(self) -> dict[str, Any]:
        content_types = [r for r in self.registrations if r.kind == "content_type"]
        taxonomies = [r for r in self.registrations if r.kind == "taxonomy"]
        return {
            "content_types": [r.model_dump(exclude={"kind", "content_types"}) for r in content_types],
            "taxonomies": [r.model_dump(exclude={"kind"}) for r in taxonomies],
        }

    def write(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(self.to_manifest(), ensure_ascii=False, indent=2, default=_jsonable),
            encoding="utf-8",
        )
        logger.info("Wrote manifest with %d registration(s) to %s", len(self.registrations), path)
        return path


register_host(HostKind.MANIFEST, ManifestHost)
