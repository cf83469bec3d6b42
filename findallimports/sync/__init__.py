"""Synchronous implementation of findallimports.

All components here operate in a blocking, synchronous manner. Callbacks
passed to ``find_all_imports_with_callback_sync`` run to completion before
the traversal moves on.
"""

from .traverser import ImportTraverser
from .api import (
    find_all_imports,
    find_all_imports_with_callback_sync,
)

__all__ = [
    'ImportTraverser',
    'find_all_imports',
    'find_all_imports_with_callback_sync',
]
