"""High-level async API for findallimports."""

from typing import Optional, Set, Union

from .._common.config import DEFAULT_MAX_DEPTH, CallbackConfig, DepthPolicy, TraversalCursor
from .._common.results import Failure, Success
from ..adapters.base import SourceAdapter
from ..adapters.javascript import JavaScriptSourceAdapter
from .traverser import AsyncImportTraverser


async def find_all_imports_with_callback_async(
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
    """Find all files recursively imported by a file, awaiting a callback on each.

    The callback is called as ``callback(file_path, parsed_module,
    accumulator)``. If it returns an awaitable, the traversal resumes only
    once that has settled; plain callbacks are also accepted. Files are
    still processed one at a time, in depth-first discovery order.

    Args:
        file_path: Absolute path of the entry file
        callback_config: CallbackConfig, or a mapping with ``callback`` and
            ``accumulator``
        cwd: Working directory used for alias resolution (default: os.getcwd())
        visited: Set of already processed paths, reused and mutated in place
        depth: Starting depth of the recursion
        max_depth: Maximum depth allowed for the recursion
        adapter: SourceAdapter to use (default: JavaScriptSourceAdapter)
        depth_policy: ABORT or PRUNE, see DepthPolicy

    Returns:
        Success carrying the visited set and the very accumulator passed
        in, or the first Failure encountered

    Example:
        async def collect(file_path, module, found):
            found.append(file_path)

        result = await find_all_imports_with_callback_async(
            "/project/comments.config.js",
            CallbackConfig(callback=collect, accumulator=[]),
        )
    """
    traverser = AsyncImportTraverser(adapter or JavaScriptSourceAdapter(), depth_policy)
    return await traverser.traverse_with_callback(
        file_path,
        TraversalCursor.start(cwd, depth, max_depth),
        set() if visited is None else visited,
        callback_config,
    )
