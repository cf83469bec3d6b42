"""Configuration system for findallimports.

This module defines how callers specify a traversal: where it starts in the
recursion, how deep it may go, what happens when the limit is hit, and the
optional per-file callback with its accumulator.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Tuple


DEFAULT_MAX_DEPTH = 100

# Probed in order when a specifier has no usable extension
DEFAULT_EXTENSIONS: Tuple[str, ...] = (
    ".js", ".mjs", ".cjs", ".jsx",
    ".ts", ".mts", ".cts", ".tsx",
)
INDEX_BASENAME = "index"

# Looked up in the working directory for baseUrl/paths aliases
ALIAS_CONFIG_FILES: Tuple[str, ...] = ("tsconfig.json", "jsconfig.json")


class DepthPolicy(Enum):
    """What happens when a file sits deeper than ``max_depth``."""
    ABORT = "abort"     # The whole traversal fails with DEPTH_EXCEEDED
    PRUNE = "prune"     # Only the offending branch is dropped


@dataclass(frozen=True)
class TraversalCursor:
    """Position of one call in the recursion.

    A fresh cursor is built for every child call, so a frame never sees
    its parent's cursor change under it.
    """

    working_directory: Any
    depth: Any = 0
    max_depth: Any = DEFAULT_MAX_DEPTH

    @classmethod
    def start(cls, cwd: Optional[str], depth: Any, max_depth: Any) -> "TraversalCursor":
        """Build the cursor of a top-level call, defaulting to the process cwd."""
        return cls(
            working_directory=os.getcwd() if cwd is None else cwd,
            depth=depth,
            max_depth=max_depth,
        )

    def descend(self) -> "TraversalCursor":
        """Return the cursor for the next level of the recursion."""
        return TraversalCursor(
            working_directory=self.working_directory,
            depth=self.depth + 1,
            max_depth=self.max_depth,
        )


@dataclass
class CallbackConfig:
    """Per-file callback and the accumulator threaded through it.

    The callback is invoked as ``callback(file_path, parsed_module,
    accumulator)`` on every file the first time it is reached. The
    accumulator is owned by the caller and handed back by reference.
    """

    callback: Callable[..., Any]
    accumulator: Any = field(default=None)
