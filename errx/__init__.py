"""errx - structured, namespaced, code-identified errors.

Usage:
    import errx

    errors = errx.Builder("billing")
    NOT_FOUND = errors.new_error("E404", "Account not found")

    try:
        account = repository.get(account_id)
    except KeyError as exc:
        err = NOT_FOUND.trace(errx.source(exc))

    errx.is_error(err, NOT_FOUND)  # True
"""

from errx.domain.errors import (
    DUPLICATE_FALLBACK_ERROR,
    Builder,
    Error,
    ErrxException,
    FallbackCollisionError,
    OptionFn,
    Options,
    add_metadata,
    as_error,
    evaluate_options,
    fallback_error,
    internal_error,
    is_error,
    new_error,
    skip_trace,
    source,
    trace,
    with_metadata,
    with_namespace,
    wrap,
)

__version__ = "0.1.0"

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
