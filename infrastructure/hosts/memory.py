"""In-memory registration host for testing and dry runs."""

from infrastructure.config.models import HostKind

from .base import HostAdapter
from .registry import register_host


class InMemoryHost(HostAdapter):
    """Keeps registrations in memory; nothing leaves the process."""

    kind = HostKind.MEMORY


register_host(HostKind.MEMORY, InMemoryHost)
