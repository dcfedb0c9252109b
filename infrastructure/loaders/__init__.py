"""
Tag table loaders.

Implements interchangeable strategies for obtaining the tag table:
- Local (synchronous JSON file read; server/test contexts)
- HTTP (asynchronous best-effort fetch; event-loop hosts)

All loaders implement the TableLoader interface and feed the same
validate-then-install step of the resolver.
"""

from infrastructure.loaders.base import TableLoader
from infrastructure.loaders.factory import make_loader, select_loader_kind
from infrastructure.loaders.http import HttpFetchLoader, resolve_tags_url
from infrastructure.loaders.local import LocalFileLoader

__all__ = [
    # Abstract base
    "TableLoader",
    # Concrete implementations
    "LocalFileLoader",
    "HttpFetchLoader",
    # Factory (most commonly used)
    "make_loader",
    "select_loader_kind",
    "resolve_tags_url",
]
