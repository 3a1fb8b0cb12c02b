"""Base adapter for registration hosts."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, Field

from domain.exceptions import RegistrationConflictError
from domain.host import RegistrationHost
from infrastructure.config.models import HostKind, RunConfig

logger = logging.getLogger(__name__)


class Registration(BaseModel):
    """One record received by a host."""

    kind: Literal["content_type", "taxonomy"]
    identifier: str
    content_types: str | list[str] | None = Field(
        default=None,
        description="Association target; only set for taxonomies.",
    )
    args: dict[str, Any] = Field(default_factory=dict)


class HostAdapter(RegistrationHost):
    """
    Common bookkeeping for the bundled hosts.

    Registrations are kept in arrival order. Registering an identifier twice
    for the same kind raises RegistrationConflictError unless the host was
    created with override=True, in which case the newer record replaces the
    older one in place.
    """

    kind: HostKind

    def __init__(self, *, override: bool = False) -> None:
        self.override = override
        self._registrations: dict[tuple[str, str], Registration] = {}

    @classmethod
    def from_cfg(cls, cfg: RunConfig) -> "HostAdapter":
        return cls(override=cfg.override)

    @property
    def registrations(self) -> list[Registration]:
        """Copies of the stored registrations, in arrival order."""
        return [r.model_copy(deep=True) for r in self._registrations.values()]

    @property
    def content_types(self) -> dict[str, dict[str, Any]]:
        return {r.identifier: r.args for r in self.registrations if r.kind == "content_type"}

    @property
    def taxonomies(self) -> dict[str, Registration]:
        return {r.identifier: r for r in self.registrations if r.kind == "taxonomy"}

    def _store(self, registration: Registration) -> None:
        key = (registration.kind, registration.identifier)
        if key in self._registrations:
            if not self.override:
                raise RegistrationConflictError(
                    f"{registration.kind.replace('_', ' ').capitalize()} {registration.identifier!r} "
                    f"is already registered in host={self.kind.value}. Use override=True to replace."
                )
            logger.warning("Replacing %s %r", registration.kind, registration.identifier)
        self._registrations[key] = registration

    def register_content_type(self, identifier: str, record: Mapping[str, Any]) -> None:
        self._store(Registration(kind="content_type", identifier=identifier, args=dict(record)))
        logger.info("Registered content type %r (host=%s)", identifier, self.kind.value)

    def register_taxonomy(
        self,
        identifier: str,
        content_types: str | Sequence[str],
        record: Mapping[str, Any],
    ) -> None:
        association = content_types if isinstance(content_types, str) else list(content_types)
        self._store(
            Registration(kind="taxonomy", identifier=identifier, content_types=association, args=dict(record))
        )
        logger.info("Registered taxonomy %r for %s (host=%s)", identifier, association, self.kind.value)
