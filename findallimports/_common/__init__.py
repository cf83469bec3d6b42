"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration (TraversalCursor, CallbackConfig, DepthPolicy)
- Result shapes (Success, Failure) and the ErrorKind taxonomy
- Input validation and statement classification

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    DEFAULT_MAX_DEPTH,
    CallbackConfig,
    DepthPolicy,
    TraversalCursor,
)
from .results import (
    ErrorKind,
    Failure,
    FindAllImportsError,
    Success,
    TraversalError,
    make_failure,
    make_success,
)
from .classifier import (
    ModuleReference,
    ReferenceKind,
    classify_statement,
    iter_module_references,
)
from .validation import (
    ValidatedInputs,
    validate_callback_config,
    validate_inputs,
)

__all__ = [
    'DEFAULT_MAX_DEPTH',
    'CallbackConfig',
    'DepthPolicy',
    'TraversalCursor',
    'ErrorKind',
    'Failure',
    'FindAllImportsError',
    'Success',
    'TraversalError',
    'make_failure',
    'make_success',
    'ModuleReference',
    'ReferenceKind',
    'classify_statement',
    'iter_module_references',
    'ValidatedInputs',
    'validate_callback_config',
    'validate_inputs',
]
