"""Command implementations for arc-db CLI."""

from .export import handle_export
from .maintenance import handle_info, handle_path, handle_vacuum
from .migrate import handle_migrate

__all__ = [
    "handle_info",
    "handle_migrate",
    "handle_vacuum",
    "handle_export",
    "handle_path",
]
