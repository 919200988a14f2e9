"""Namespace builder (error registry).

A Builder owns one namespace and a registry of the errors created through
it. Every error it produces or copies is stamped with the builder's
namespace, and unknown codes resolve to the builder's fallback error.

Architecture:
- One Builder per owning component, passed explicitly (no global registry)
- Registry grows monotonically; re-registering a code overwrites it
- Registering the fallback's code raises FallbackCollisionError
- No internal locking: concurrent new_error()/copy_error() calls on the same
  builder need external synchronization; get() is safe once registration
  has finished

Usage:
    from errx import Builder, add_metadata

    errors = Builder("billing")
    ACCOUNT_NOT_FOUND = errors.new_error(
        "E404", "Account not found", add_metadata("http_status", 404)
    )

    errors.get("E404")      # ACCOUNT_NOT_FOUND
    errors.get("UNKNOWN")   # errors.fallback_error
"""

from errx.core.container import get_logger
from errx.domain.errors.error import Error, new_error
from errx.domain.errors.exceptions import FallbackCollisionError
from errx.domain.errors.helpers import internal_error
from errx.domain.errors.options import OptionFn, evaluate_options, with_namespace
from errx.domain.protocols.logger_protocol import LoggerProtocol


class Builder:
    """Error factory and registry scoped to one namespace.

    Args:
        namespace: Namespace forced onto every produced error.
        *options: fallback_error(...) to replace the default internal error.
        logger: Structured logger; defaults to the container logger bound
            with component="errx.builder" and the namespace.
    """

    def __init__(
        self,
        namespace: str,
        *options: OptionFn,
        logger: LoggerProtocol | None = None,
    ) -> None:
        evaluated = evaluate_options(options)
        fallback = (
            evaluated.fallback_error
            if evaluated.fallback_error is not None
            else internal_error()
        )

        self._namespace = namespace
        self._fallback_error = fallback.copy(with_namespace(namespace))
        self._registry: dict[str, Error] = {}
        self._logger = logger or get_logger().bind(
            component="errx.builder", namespace=namespace
        )

    @property
    def namespace(self) -> str:
        """Namespace of every error produced by this builder."""
        return self._namespace

    @property
    def fallback_error(self) -> Error:
        """Error returned by get() for unregistered codes."""
        return self._fallback_error

    def new_error(self, code: str, message: str, *options: OptionFn) -> Error:
        """Create and register an error in the builder's namespace.

        A with_namespace option from the caller is overridden by the
        builder's namespace.

        Raises:
            FallbackCollisionError: If code equals the fallback's code.
        """
        self._ensure_not_fallback(code)
        error = new_error(code, message, *self._merge_options(options))
        self._register(error)
        return error

    def copy_error(self, error: Error, *options: OptionFn) -> Error:
        """Copy an existing error into the builder's namespace and register it.

        Raises:
            FallbackCollisionError: If the error's code equals the fallback's code.
        """
        self._ensure_not_fallback(error.code)
        copied = error.copy(*self._merge_options(options))
        self._register(copied)
        return copied

    def get(self, code: str) -> Error:
        """Return the registered error for code, or the fallback error."""
        return self._registry.get(code, self._fallback_error)

    def codes(self) -> tuple[str, ...]:
        """Return registered codes in registration order."""
        return tuple(self._registry)

    def __contains__(self, code: object) -> bool:
        return code in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def _merge_options(self, options: tuple[OptionFn, ...]) -> tuple[OptionFn, ...]:
        # Builder namespace always wins
        return (*options, with_namespace(self._namespace))

    def _ensure_not_fallback(self, code: str) -> None:
        if code != self._fallback_error.code:
            return

        exc = FallbackCollisionError(namespace=self._namespace, code=code)
        self._logger.critical(
            "Error code collides with fallback error",
            error=exc,
            namespace=self._namespace,
            code=code,
        )
        raise exc

    def _register(self, error: Error) -> None:
        overwritten = error.code in self._registry
        self._registry[error.code] = error
        self._logger.debug(
            "Error registered",
            namespace=self._namespace,
            code=error.code,
            overwritten=overwritten,
        )
