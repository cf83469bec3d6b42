"""Asynchronous implementation of findallimports.

The per-file callback is awaited, but files are still processed one at a
time in depth-first order; there is no fan-out across sibling imports.
"""

from .traverser import AsyncImportTraverser
from .api import find_all_imports_with_callback_async

__all__ = [
    'AsyncImportTraverser',
    'find_all_imports_with_callback_async',
]
