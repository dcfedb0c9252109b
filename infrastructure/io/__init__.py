"""I/O utilities: filesystem operations."""

from infrastructure.io.fs import ensure_exists, read_json

__all__ = [
    "ensure_exists",
    "read_json",
]
