"""High-level synchronous API for findallimports.

Two entry points share the ImportTraverser:

- ``find_all_imports``: the set of files reachable from a file
- ``find_all_imports_with_callback_sync``: the same, running a callback on
  every file and threading an accumulator through it
"""

from typing import Optional, Set, Union

from .._common.config import DEFAULT_MAX_DEPTH, CallbackConfig, DepthPolicy, TraversalCursor
from .._common.results import Failure, Success
from ..adapters.base import SourceAdapter
from ..adapters.javascript import JavaScriptSourceAdapter
from .traverser import ImportTraverser


def find_all_imports(
    file_path: str,
    *,
    cwd: Optional[str] = None,
    visited: Optional[Set[str]] = None,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    adapter: Optional[SourceAdapter] = None,
    depth_policy: DepthPolicy = DepthPolicy.ABORT,
) -> Union[Success, Failure]:
    """Find all files recursively imported by a file.

    Args:
        file_path: Absolute path of the entry file, such as a project's
            ``comments.config.js``
        cwd: Working directory used for alias resolution (default: os.getcwd())
        visited: Set of already processed paths. Reused and mutated in place
            when given, so files already in it are neither rescanned nor
            walked again.
        depth: Starting depth of the recursion
        max_depth: Maximum depth allowed for the recursion
        adapter: SourceAdapter to use (default: JavaScriptSourceAdapter)
        depth_policy: ABORT fails the whole traversal past max_depth,
            PRUNE only drops the offending branch

    Returns:
        Success whose ``visited`` holds every reachable file, or the first
        Failure encountered

    Example:
        result = find_all_imports("/project/comments.config.js")
        if result.success:
            print(sorted(result.visited))
    """
    traverser = ImportTraverser(adapter or JavaScriptSourceAdapter(), depth_policy)
    return traverser.traverse(
        file_path,
        TraversalCursor.start(cwd, depth, max_depth),
        set() if visited is None else visited,
    )


def find_all_imports_with_callback_sync(
    file_path: str,
    callback_config: Union[CallbackConfig, dict],
    *,
    cwd: Optional[str] = None,
    visited: Optional[Set[str]] = None,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    adapter: Optional[SourceAdapter] = None,
    depth_policy: DepthPolicy = DepthPolicy.ABORT,
) -> Union[Success, Failure]:
    """Find all files recursively imported by a file, running a callback on each.

    The callback is called as ``callback(file_path, parsed_module,
    accumulator)`` the first time each file is reached, before its own
    imports are followed. It must be a regular function returning a
    plain value; coroutine functions belong to
    ``find_all_imports_with_callback_async``.

    Args:
        file_path: Absolute path of the entry file
        callback_config: CallbackConfig, or a mapping with ``callback`` and
            ``accumulator``
        cwd, visited, depth, max_depth, adapter, depth_policy: As for
            ``find_all_imports``

    Returns:
        Success carrying the visited set and the very accumulator passed
        in, or the first Failure encountered
    """
    traverser = ImportTraverser(adapter or JavaScriptSourceAdapter(), depth_policy)
    return traverser.traverse_with_callback(
        file_path,
        TraversalCursor.start(cwd, depth, max_depth),
        set() if visited is None else visited,
        callback_config,
    )
