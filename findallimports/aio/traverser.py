"""Async import traversal for findallimports.

Mirrors the synchronous ImportTraverser, awaiting the per-file callback.
The walk stays strictly sequential and depth-first: the only suspension
points are the callback and the recursive call into the next file, and
sibling imports are never fetched concurrently.
"""

import inspect
import logging
import os
from typing import Any, Set, Union

from .._common.classifier import ModuleReference, iter_module_references
from .._common.config import CallbackConfig, DepthPolicy, TraversalCursor
from .._common.results import ErrorKind, Failure, Success, make_failure, make_success
from .._common.validation import validate_callback_config, validate_inputs
from ..adapters.base import SourceAdapter


logger = logging.getLogger(__name__)

Result = Union[Success, Failure]


class AsyncImportTraverser:
    """Async depth-first traversal of a file's module references.

    The callback's awaitable is settled before the traverser moves on, so
    every file sees the accumulator exactly as the previous files' callbacks
    left it.
    """

    def __init__(self, adapter: SourceAdapter, depth_policy: DepthPolicy = DepthPolicy.ABORT):
        """Initialize traverser with an adapter.

        Args:
            adapter: SourceAdapter used to check, parse and resolve files
            depth_policy: Whether exceeding max_depth aborts everything or
                only prunes the offending branch
        """
        self.adapter = adapter
        self.depth_policy = depth_policy

    async def traverse_with_callback(
        self,
        file_path: str,
        cursor: TraversalCursor,
        visited: Set[str],
        callback_config: Any,
    ) -> Result:
        """Traverse ``file_path`` and everything it imports, awaiting the
        callback on every new file.

        Args:
            file_path: Absolute path of the file to process
            cursor: Working directory and depth of this call
            visited: Shared set of already processed files, mutated in place
            callback_config: CallbackConfig or mapping; an awaitable returned
                by the callback is awaited

        Returns:
            Success with the visited set and the accumulator, or the first
            Failure met anywhere in the recursion
        """
        validated = validate_inputs(file_path, cursor, visited, self.adapter)
        if isinstance(validated, Failure):
            return validated

        callback_config = validate_callback_config(callback_config, allow_coroutine=True)
        if isinstance(callback_config, Failure):
            return callback_config
        accumulator = callback_config.accumulator

        if file_path in visited:
            logger.debug("Already visited %s", file_path)
            return make_success(visited, accumulator)

        visited.add(file_path)
        logger.debug("Visiting %s at depth %s", file_path, cursor.depth)

        try:
            outcome = callback_config.callback(file_path, validated.parsed_module, accumulator)
            # Plain callbacks are allowed; only an awaitable result is awaited
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as e:
            return make_failure(
                f"Callback error in {file_path}.\nError:\n{e}",
                ErrorKind.CALLBACK_FAILURE,
            )

        current_dir = os.path.dirname(file_path)
        child_cursor = cursor.descend()
        for reference in iter_module_references(validated.parsed_module.body):
            result = await self._process_import(
                reference, current_dir, child_cursor, visited, callback_config
            )
            if not result.success:
                return result

        return make_success(visited, accumulator)

    async def _process_import(
        self,
        reference: ModuleReference,
        current_dir: str,
        cursor: TraversalCursor,
        visited: Set[str],
        callback_config: CallbackConfig,
    ) -> Result:
        """Resolve one reference and recurse into it."""
        resolved_path = self.adapter.resolve(
            current_dir, reference.specifier, cursor.working_directory
        )
        if not resolved_path:
            logger.debug("Skipping unresolved %s %r", reference.kind.value, reference.specifier)
            return make_success(visited, callback_config.accumulator)

        result = await self.traverse_with_callback(resolved_path, cursor, visited, callback_config)
        if self._should_prune(result):
            logger.debug("Pruned %s beyond max depth %s", resolved_path, cursor.max_depth)
            return make_success(visited, callback_config.accumulator)
        return result

    def _should_prune(self, result: Result) -> bool:
        return (
            self.depth_policy is DepthPolicy.PRUNE
            and not result.success
            and result.kind is ErrorKind.DEPTH_EXCEEDED
        )
