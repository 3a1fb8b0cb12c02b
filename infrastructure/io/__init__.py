"""I/O utilities: filesystem operations."""

from infrastructure.io.fs import ensure_exists, write_json

__all__ = [
    "ensure_exists",
    "write_json",
]
