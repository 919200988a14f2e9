"""Package-level helpers.

Shortcuts for promoting arbitrary exceptions into the error model.
"""

from errx.core.constants import INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE
from errx.domain.errors.error import Error, new_error
from errx.domain.errors.options import skip_trace, source


def internal_error() -> Error:
    """Return a fresh, un-namespaced generic internal error."""
    return new_error(INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE)


def trace(err: Error | BaseException | None) -> Error | None:
    """Trace any error at the caller's location.

    An Error is re-traced with itself as source, so its trace history is kept.
    Any other exception is wrapped into internal_error().

    Args:
        err: Error, exception or None.

    Returns:
        Error | None: Traced error, or None when err is None.
    """
    if err is None:
        return None

    traced = err if isinstance(err, Error) else internal_error()
    # One extra frame: this helper sits between the caller and Error.trace()
    return traced.trace(source(err), skip_trace(2))


def wrap(err: Error | BaseException | None) -> Error | None:
    """Wrap err into internal_error(); None stays None."""
    return internal_error().wrap(err)
