"""Error model package.

Exports the error value, option functions, builder and helpers.

Usage:
    from errx.domain.errors import Builder, Error, new_error, trace
"""

from errx.domain.errors.builder import Builder
from errx.domain.errors.error import Error, as_error, is_error, new_error
from errx.domain.errors.exceptions import (
    DUPLICATE_FALLBACK_ERROR,
    ErrxException,
    FallbackCollisionError,
)
from errx.domain.errors.helpers import internal_error, trace, wrap
from errx.domain.errors.options import (
    OptionFn,
    Options,
    add_metadata,
    evaluate_options,
    fallback_error,
    skip_trace,
    source,
    with_metadata,
    with_namespace,
)

__all__ = [
    "Builder",
    "DUPLICATE_FALLBACK_ERROR",
    "Error",
    "ErrxException",
    "FallbackCollisionError",
    "OptionFn",
    "Options",
    "add_metadata",
    "as_error",
    "evaluate_options",
    "fallback_error",
    "internal_error",
    "is_error",
    "new_error",
    "skip_trace",
    "source",
    "trace",
    "with_metadata",
    "with_namespace",
    "wrap",
]
