"""Centralized constants for internal implementation details.

This module contains constants that are part of the error model's stable
contract, NOT environment-specific configuration. For environment-specific
settings, use `errx/core/config.py` instead.

Categories:
- Namespaces: Namespace owned by errx itself
- Well-known errors: Code/message pairs of the built-in error values
- Tracing: Trace capture defaults
- Display: Line prefixes of the error display string

Example:
    >>> from errx.core.constants import INTERNAL_ERROR_CODE
    >>> builder.get(INTERNAL_ERROR_CODE)
"""

# =============================================================================
# Namespaces
# =============================================================================

PACKAGE_NAMESPACE: str = "errx"
"""Namespace of errors produced by errx itself."""


# =============================================================================
# Well-known Errors
# =============================================================================

INTERNAL_ERROR_CODE: str = "ERROR"
"""Code of the generic internal error (universal default fallback)."""

INTERNAL_ERROR_MESSAGE: str = "Internal Error"
"""Message of the generic internal error."""

DUPLICATE_FALLBACK_CODE: str = "ERR_1"
"""Code of the error signalled when a builder code collides with its fallback."""

DUPLICATE_FALLBACK_MESSAGE: str = (
    "Cannot create new Error that has same code with Fallback Error"
)
"""Message of the fallback collision error."""


# =============================================================================
# Tracing
# =============================================================================

DEFAULT_SKIP_TRACE: int = 1
"""Frames skipped by Error.trace() by default (1 = immediate caller)."""

UNKNOWN_LOCATION: str = "<unknown>:0"
"""Trace entry used when the requested frame does not exist."""


# =============================================================================
# Display
# =============================================================================

CAUSED_BY_PREFIX: str = "\n  CausedBy => "
"""Prefix of the causal error line."""

TRACES_PREFIX: str = "\n  Traces => "
"""Prefix of the first trace entry."""

TRACES_SEPARATOR: str = "\n            "
"""Continuation indent between trace entries (aligned under the first)."""
