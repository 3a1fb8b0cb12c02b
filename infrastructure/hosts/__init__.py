"""
Registration hosts.

Implements the adapter pattern for the host platform's registration calls:
- InMemoryHost (testing, dry runs)
- ManifestHost (JSON export for the platform bootstrap)

All hosts implement the RegistrationHost interface from the domain layer.
"""

from infrastructure.hosts.base import HostAdapter, Registration
from infrastructure.hosts.factory import make_host
from infrastructure.hosts.manifest import ManifestHost
from infrastructure.hosts.memory import InMemoryHost

__all__ = [
    # Abstract base
    "HostAdapter",
    "Registration",
    # Concrete implementations
    "InMemoryHost",
    "ManifestHost",
    # Factory (most commonly used)
    "make_host",
]
