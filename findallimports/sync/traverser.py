"""Synchronous import traversal for findallimports.

The traverser walks the reference graph depth-first, in source order,
recursing through every resolvable top-level import of each file. All
recursive calls share one visited set and, in the callback variant, one
accumulator.
"""

import inspect
import logging
import os
from typing import Any, Optional, Set, Union

from .._common.classifier import ModuleReference, iter_module_references
from .._common.config import CallbackConfig, DepthPolicy, TraversalCursor
from .._common.results import ErrorKind, Failure, Success, make_failure, make_success
from .._common.validation import validate_callback_config, validate_inputs
from ..adapters.base import SourceAdapter


logger = logging.getLogger(__name__)

Result = Union[Success, Failure]


def _discard_awaitable(outcome: Any) -> None:
    """Close an unstarted coroutine, or cancel a future, without running it."""
    if inspect.iscoroutine(outcome):
        outcome.close()
    elif hasattr(outcome, "cancel"):
        outcome.cancel()


class ImportTraverser:
    """Depth-first traversal of a file's module references.

    Callbacks run immediately: each one completes before the traverser
    looks at the file's imports.
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

    def traverse(self, file_path: str, cursor: TraversalCursor, visited: Set[str]) -> Result:
        """Traverse ``file_path`` and everything it imports.

        Args:
            file_path: Absolute path of the file to process
            cursor: Working directory and depth of this call
            visited: Shared set of already processed files, mutated in place

        Returns:
            Success with the visited set, or the first Failure met anywhere
            in the recursion
        """
        return self._visit(file_path, cursor, visited, None, with_callback=False)

    def traverse_with_callback(
        self,
        file_path: str,
        cursor: TraversalCursor,
        visited: Set[str],
        callback_config: Any,
    ) -> Result:
        """Traverse like ``traverse``, running the callback on every new file.

        Returns:
            Success with the visited set and the accumulator, or the first
            Failure met anywhere in the recursion
        """
        return self._visit(file_path, cursor, visited, callback_config, with_callback=True)

    def _visit(
        self,
        file_path: str,
        cursor: TraversalCursor,
        visited: Set[str],
        callback_config: Any,
        with_callback: bool,
    ) -> Result:
        validated = validate_inputs(file_path, cursor, visited, self.adapter)
        if isinstance(validated, Failure):
            return validated

        accumulator = None
        if with_callback:
            callback_config = validate_callback_config(callback_config, allow_coroutine=False)
            if isinstance(callback_config, Failure):
                return callback_config
            accumulator = callback_config.accumulator

        # Already processed on another path (or in an earlier call)
        if file_path in visited:
            logger.debug("Already visited %s", file_path)
            return make_success(visited, accumulator)

        # Marked before recursing so that cycles back into this file stop here
        visited.add(file_path)
        logger.debug("Visiting %s at depth %s", file_path, cursor.depth)

        if with_callback:
            try:
                outcome = callback_config.callback(file_path, validated.parsed_module, accumulator)
            except Exception as e:
                return make_failure(
                    f"Callback error in {file_path}.\nError:\n{e}",
                    ErrorKind.CALLBACK_FAILURE,
                )
            # Awaitables are never settled by the sync engine
            if inspect.isawaitable(outcome):
                _discard_awaitable(outcome)
                return make_failure(
                    f"Callback error in {file_path}.\nError:\n"
                    "callback returned an awaitable; "
                    "use find_all_imports_with_callback_async instead.",
                    ErrorKind.CALLBACK_FAILURE,
                )

        current_dir = os.path.dirname(file_path)
        child_cursor = cursor.descend()
        for reference in iter_module_references(validated.parsed_module.body):
            result = self._process_import(
                reference, current_dir, child_cursor, visited, callback_config, with_callback
            )
            if not result.success:
                return result

        return make_success(visited, accumulator)

    def _process_import(
        self,
        reference: ModuleReference,
        current_dir: str,
        cursor: TraversalCursor,
        visited: Set[str],
        callback_config: Optional[CallbackConfig],
        with_callback: bool,
    ) -> Result:
        """Resolve one reference and recurse into it."""
        accumulator = callback_config.accumulator if with_callback else None

        resolved_path = self.adapter.resolve(
            current_dir, reference.specifier, cursor.working_directory
        )
        # Bare packages and other non-local modules are skipped
        if not resolved_path:
            logger.debug("Skipping unresolved %s %r", reference.kind.value, reference.specifier)
            return make_success(visited, accumulator)

        result = self._visit(resolved_path, cursor, visited, callback_config, with_callback)
        if self._should_prune(result):
            logger.debug("Pruned %s beyond max depth %s", resolved_path, cursor.max_depth)
            return make_success(visited, accumulator)
        return result

    def _should_prune(self, result: Result) -> bool:
        return (
            self.depth_policy is DepthPolicy.PRUNE
            and not result.success
            and result.kind is ErrorKind.DEPTH_EXCEEDED
        )
