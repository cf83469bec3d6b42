"""Input validation shared by the sync and aio engines.

Validation runs before any traversal state is touched. Each check returns
early with a ``Failure``; on success the caller gets the validated inputs
together with the parsed module, so the file is only parsed once per call.
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Set, Union

from pydantic import TypeAdapter, ValidationError

from .config import CallbackConfig, TraversalCursor
from .results import ErrorKind, Failure, is_supposed_to_be, make_failure


VisitedSetSchema = TypeAdapter(Set[str])


@dataclass(frozen=True)
class ValidatedInputs:
    """Inputs that passed validation, plus what validation produced."""
    file_path: str
    cursor: TraversalCursor
    visited: Set[str]
    parsed_module: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_visited_schema(visited: Any) -> Union[Failure, None]:
    """Structural check of the visited set's contents.

    Returns:
        Failure naming the offending entries, or None if the set is valid
    """
    try:
        VisitedSetSchema.validate_python(visited, strict=True)
    except ValidationError as e:
        offending = sorted(repr(item) for item in visited if not isinstance(item, str))
        details = f" Offending values: {', '.join(offending)}." if offending else ""
        return make_failure(
            f"All values within visited should be strings.{details} "
            f"({e.error_count()} validation error(s))",
            ErrorKind.VALIDATION_SCHEMA_FAILURE,
        )
    return None


def validate_inputs(
    file_path: Any,
    cursor: TraversalCursor,
    visited: Any,
    adapter: Any,
) -> Union[Failure, ValidatedInputs]:
    """Validate a file path and traversal options, structurally and functionally.

    Args:
        file_path: Absolute path of the file about to be traversed
        cursor: Working directory, depth and max depth of this call
        visited: The shared visited set
        adapter: Source adapter providing exists() and parse()

    Returns:
        Failure on the first failed check, ValidatedInputs otherwise
    """
    if not isinstance(file_path, str):
        return make_failure(is_supposed_to_be("file_path", "a string"), ErrorKind.INVALID_INPUT)
    if not isinstance(cursor.working_directory, str):
        return make_failure(is_supposed_to_be("cwd", "a string"), ErrorKind.INVALID_INPUT)
    if not isinstance(visited, set):
        return make_failure(is_supposed_to_be("visited", "a set"), ErrorKind.INVALID_INPUT)

    if not _is_number(cursor.depth):
        return make_failure(is_supposed_to_be("depth", "a number"), ErrorKind.INVALID_INPUT)
    if not _is_number(cursor.max_depth):
        return make_failure(is_supposed_to_be("max_depth", "a number"), ErrorKind.INVALID_INPUT)

    schema_failure = validate_visited_schema(visited)
    if schema_failure is not None:
        return schema_failure

    # Fails early if max depth is recursively reached
    if cursor.depth > cursor.max_depth:
        return make_failure(
            f"Max depth {cursor.max_depth} reached at {file_path}.",
            ErrorKind.DEPTH_EXCEEDED,
        )

    if not adapter.exists(file_path):
        return make_failure(f"File not found at {file_path}.", ErrorKind.FILE_NOT_FOUND)

    parsed_module = adapter.parse(file_path)
    if parsed_module is None:
        return make_failure(
            f"Failed to parse a syntax tree for {file_path}.",
            ErrorKind.PARSE_FAILURE,
        )

    return ValidatedInputs(
        file_path=file_path,
        cursor=cursor,
        visited=visited,
        parsed_module=parsed_module,
    )


def validate_callback_config(
    callback_config: Any,
    allow_coroutine: bool,
) -> Union[Failure, CallbackConfig]:
    """Validate and normalize a callback configuration.

    Accepts a CallbackConfig or a mapping with ``callback`` and an optional
    ``accumulator``. The accumulator is opaque and is never copied.

    Args:
        callback_config: Configuration supplied by the caller
        allow_coroutine: False for the synchronous engine, which cannot
            await a coroutine function's result

    Returns:
        Failure, or the CallbackConfig to thread through the traversal
    """
    if isinstance(callback_config, CallbackConfig):
        config = callback_config
    elif isinstance(callback_config, Mapping):
        if "callback" not in callback_config:
            return make_failure(
                is_supposed_to_be("callback_config", "a mapping with a 'callback' key"),
                ErrorKind.INVALID_INPUT,
            )
        config = CallbackConfig(
            callback=callback_config["callback"],
            accumulator=callback_config.get("accumulator"),
        )
    else:
        return make_failure(
            is_supposed_to_be("callback_config", "a CallbackConfig or a mapping"),
            ErrorKind.INVALID_INPUT,
        )

    if not callable(config.callback):
        return make_failure(
            is_supposed_to_be("callback_config.callback", "callable"),
            ErrorKind.INVALID_INPUT,
        )

    if not allow_coroutine and inspect.iscoroutinefunction(config.callback):
        return make_failure(
            "callback_config.callback is a coroutine function; "
            "use find_all_imports_with_callback_async instead.",
            ErrorKind.INVALID_INPUT,
        )

    return config
