"""findallimports - Recursive import discovery for JavaScript and TypeScript files.

Given an entry file (a project's ``comments.config.js``, a bundler entry...),
findallimports walks its top-level ``import`` declarations, ``import()``
expressions and ``require()`` calls, recursively, and returns every local
file reached, each exactly once.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from findallimports.sync import find_all_imports
    from findallimports.sync import find_all_imports_with_callback_sync

Asynchronous:
    from findallimports.aio import find_all_imports_with_callback_async
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every entry point returns ``Success`` or ``Failure`` and never raises for
a bad input, a missing file or a failing callback.
"""

import logging

__version__ = "0.1.0"

from . import sync
from . import aio
from ._common import (
    DEFAULT_MAX_DEPTH,
    CallbackConfig,
    DepthPolicy,
    ErrorKind,
    Failure,
    FindAllImportsError,
    Success,
    TraversalError,
)
from .adapters import (
    CachingSourceAdapter,
    FilesystemCachingAdapter,
    JavaScriptSourceAdapter,
    ParsedModule,
    SourceAdapter,
)
from .sync import find_all_imports, find_all_imports_with_callback_sync
from .aio import find_all_imports_with_callback_async

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "sync",
    "aio",
    "DEFAULT_MAX_DEPTH",
    "CallbackConfig",
    "DepthPolicy",
    "ErrorKind",
    "Failure",
    "FindAllImportsError",
    "Success",
    "TraversalError",
    "CachingSourceAdapter",
    "FilesystemCachingAdapter",
    "JavaScriptSourceAdapter",
    "ParsedModule",
    "SourceAdapter",
    "find_all_imports",
    "find_all_imports_with_callback_sync",
    "find_all_imports_with_callback_async",
]
