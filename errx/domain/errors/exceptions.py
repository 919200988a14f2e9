"""Exceptions raised by errx.

Error values are data and are never raised by errx itself. The only
condition that aborts a call is a programming mistake: registering a code
on a Builder that equals the code of its fallback error.

Error Hierarchy:
    ErrxException (base)
    └── FallbackCollisionError (builder code collides with fallback)
"""

from errx.core.constants import (
    DUPLICATE_FALLBACK_CODE,
    DUPLICATE_FALLBACK_MESSAGE,
    PACKAGE_NAMESPACE,
)
from errx.domain.errors.error import Error, new_error
from errx.domain.errors.options import with_metadata, with_namespace

DUPLICATE_FALLBACK_ERROR = new_error(
    DUPLICATE_FALLBACK_CODE,
    DUPLICATE_FALLBACK_MESSAGE,
    with_namespace(PACKAGE_NAMESPACE),
)


class ErrxException(Exception):
    """Base exception carrying an errx error value.

    Attributes:
        error: Error value describing the failure.
    """

    def __init__(self, error: Error) -> None:
        super().__init__(str(error))
        self.error = error


class FallbackCollisionError(ErrxException):
    """Raised when a Builder is asked to register its fallback error's code.

    Attributes:
        error: DUPLICATE_FALLBACK_ERROR copy with namespace/code metadata.
        namespace: Namespace of the offending builder.
        code: Rejected code.
    """

    def __init__(self, *, namespace: str, code: str) -> None:
        super().__init__(
            DUPLICATE_FALLBACK_ERROR.copy(
                with_metadata({"builder_namespace": namespace, "code": code})
            )
        )
        self.namespace = namespace
        self.code = code
