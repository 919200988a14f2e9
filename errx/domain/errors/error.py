"""Structured error value.

Error is the central value of errx: a code-identified, optionally namespaced
error carrying metadata, call-site traces and an optional causal error.

Architecture:
- Dataclass AND Exception: flows as data, or is raised and chained with
  ``raise ... from ...`` like any exception
- Fields cannot be reassigned after construction (FrozenInstanceError);
  only the exception machinery attributes (__traceback__, __cause__...) stay writable
- Every transformation (copy, wrap, trace, add_metadata) returns a new value
- Identity is (namespace, code); message, metadata and traces never count
- Metadata is held in a private dict behind a read-only MappingProxyType

Display format:
    "<namespace>: [<code>] <message>"   namespace set
    "<message>"                         no namespace
    "[<code>] <message>"                no namespace, captured as a source
    "\\n  CausedBy => <cause>"           when a causal error exists
    "\\n  Traces => <entry>\\n            <entry>"  when traces exist

Usage:
    from errx.domain.errors import new_error, source, with_namespace

    NOT_FOUND = new_error("E404", "Account not found", with_namespace("billing"))

    def load(account_id):
        try:
            return repository.get(account_id)
        except KeyError as exc:
            return NOT_FOUND.trace(source(exc))
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import FrozenInstanceError, dataclass, field, replace
from types import MappingProxyType
from typing import Any

from errx.core.constants import CAUSED_BY_PREFIX, TRACES_PREFIX, TRACES_SEPARATOR
from errx.core.container import get_call_site_resolver
from errx.domain.errors.options import OptionFn, evaluate_options, with_metadata


_EXCEPTION_ATTRIBUTES = frozenset(
    {"__traceback__", "__cause__", "__context__", "__suppress_context__", "__notes__"}
)


@dataclass(kw_only=True, eq=False)
class Error(Exception):
    """Immutable structured error.

    Attributes:
        code: Stable identifier of the logical error kind.
        message: Human-readable message.
        namespace: Owning component; empty means no namespace.
        metadata: Read-only mapping of arbitrary values.
        traces: Call-site entries, most recent first.
        source_error: Causal error (another Error or any exception).
        is_source: True once captured as another error's traced source.
    """

    code: str
    message: str
    namespace: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    traces: tuple[str, ...] = ()
    source_error: Error | BaseException | None = None
    is_source: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        object.__setattr__(self, "traces", tuple(self.traces))

    def __setattr__(self, name: str, value: Any) -> None:
        # Fields are assigned once by the generated __init__
        if name in _EXCEPTION_ATTRIBUTES or (
            name in self.__dataclass_fields__ and name not in self.__dict__
        ):
            object.__setattr__(self, name, value)
            return
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        if name in _EXCEPTION_ATTRIBUTES:
            object.__delattr__(self, name)
            return
        raise FrozenInstanceError(f"cannot delete field {name!r}")

    def __str__(self) -> str:
        message = self._base_message()
        if self.source_error is not None:
            message += CAUSED_BY_PREFIX + str(self.source_error)
        if self.traces:
            message += TRACES_PREFIX + TRACES_SEPARATOR.join(self.traces)
        return message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash((self.namespace, self.code))

    def matches(self, other: object) -> bool:
        """Return True when other is an Error with the same namespace and code."""
        return (
            isinstance(other, Error)
            and other.namespace == self.namespace
            and other.code == self.code
        )

    def unwrap(self) -> Error | BaseException | None:
        """Return the immediate causal error, if any."""
        return self.source_error

    def copy(self, *options: OptionFn) -> Error:
        """Duplicate the error without its traces.

        Recognized options: with_namespace, with_metadata, add_metadata.
        Metadata from the options replaces the receiver's metadata when
        non-empty; otherwise the receiver's metadata is duplicated.

        Returns:
            Error: New error sharing code, message, namespace and source.
        """
        evaluated = evaluate_options(options)
        return Error(
            code=self.code,
            message=self.message,
            namespace=evaluated.namespace or self.namespace,
            metadata=evaluated.metadata or self.metadata,
            source_error=self.source_error,
        )

    def wrap(self, cause: Error | BaseException | None) -> Error | None:
        """Return a copy caused by ``cause``, or None when there is no cause."""
        if cause is None:
            return None
        return self._caused_by(cause)

    def trace(self, *options: OptionFn) -> Error:
        """Return a copy with the caller's location prepended to its traces.

        Recognized options: source, skip_trace, with_metadata, add_metadata.

        Source handling:
            - none: the receiver's own traces are kept
            - same error (namespace and code): the source's traces are
              pulled forward and the source is not wrapped
            - another Error with traces: its traces move to the result and
              the result wraps a trace-less copy marked as a source
            - anything else: wrapped as the causal error

        Option metadata is merged into the result last.

        Returns:
            Error: Traced error.
        """
        evaluated = evaluate_options(options)
        location = get_call_site_resolver().capture_location(evaluated.skip_trace)
        traced, inherited = self._wrap_for_trace(evaluated.source)
        return replace(
            traced,
            traces=(location, *inherited),
            metadata={**traced.metadata, **evaluated.metadata},
        )

    def add_metadata(self, key: str, value: Any) -> Error:
        """Return a copy with one metadata entry set."""
        return self.copy(with_metadata({**self.metadata, key: value}))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict (structured logging)."""
        caused_by: dict[str, Any] | str | None = None
        if isinstance(self.source_error, Error):
            caused_by = self.source_error.to_dict()
        elif self.source_error is not None:
            caused_by = str(self.source_error)

        return {
            "code": self.code,
            "namespace": self.namespace,
            "message": self.message,
            "metadata": dict(self.metadata),
            "traces": list(self.traces),
            "caused_by": caused_by,
        }

    def _base_message(self) -> str:
        if not self.namespace:
            if self.is_source:
                return f"[{self.code}] {self.message}"
            return self.message
        return f"{self.namespace}: [{self.code}] {self.message}"

    def _caused_by(self, cause: Error | BaseException) -> Error:
        return replace(self.copy(), source_error=cause)

    def _wrap_for_trace(
        self, cause: Error | BaseException | None
    ) -> tuple[Error, tuple[str, ...]]:
        if cause is None:
            return self.copy(), self.traces

        if is_error(cause, self):
            found = as_error(cause)
            return self.copy(), found.traces if found is not None else ()

        if isinstance(cause, Error) and cause.traces:
            detached = replace(cause, traces=(), is_source=True)
            return self._caused_by(detached), cause.traces

        return self._caused_by(cause), ()


def new_error(code: str, message: str, *options: OptionFn) -> Error:
    """Create an error with no traces.

    Recognized options: with_namespace, with_metadata, add_metadata.
    Code and message are not validated.
    """
    evaluated = evaluate_options(options)
    return Error(
        code=code,
        message=message,
        namespace=evaluated.namespace,
        metadata=evaluated.metadata,
    )


def _next_in_chain(err: BaseException) -> BaseException | None:
    if isinstance(err, Error) and err.source_error is not None:
        return err.source_error
    return err.__cause__


def is_error(
    err: Error | BaseException | None, target: Error | BaseException | None
) -> bool:
    """Report whether any error in err's causal chain matches target.

    The chain follows Error.unwrap() and otherwise ``__cause__``
    (``raise ... from ...``), so an Error raised as the cause of any
    exception is found. Error targets match by namespace and code;
    exception targets match by identity.

    Args:
        err: Error or exception to inspect.
        target: Error or exception to look for.

    Returns:
        bool: True when a link of the chain matches.
    """
    if target is None:
        return err is None

    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(target, Error):
            if isinstance(current, Error) and current.matches(target):
                return True
        elif current is target:
            return True
        current = _next_in_chain(current)
    return False


def as_error(err: Error | BaseException | None) -> Error | None:
    """Return the first Error in err's causal chain, or None."""
    seen: set[int] = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, Error):
            return current
        current = _next_in_chain(current)
    return None
