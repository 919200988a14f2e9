"""Option set for error construction, copying, tracing and builders.

Options are an immutable value object. Each option function takes the
current Options and returns a new one, and evaluate_options() folds a
sequence of them over the defaults.

Usage:
    from errx.domain.errors.options import add_metadata, with_namespace

    err = new_error("E404", "Not found", with_namespace("billing"),
                    add_metadata("http_status", 404))
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import TYPE_CHECKING, Any

from errx.core.constants import DEFAULT_SKIP_TRACE

if TYPE_CHECKING:
    from errx.domain.errors.error import Error


@dataclass(frozen=True, slots=True, kw_only=True)
class Options:
    """Evaluated option set.

    Attributes:
        namespace: Namespace override (empty means no override).
        metadata: Metadata to set (copy) or merge (trace).
        skip_trace: Frames to skip when capturing a trace entry.
        fallback_error: Fallback error of a Builder.
        source: Causal error supplied to Error.trace().
    """

    namespace: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    skip_trace: int = DEFAULT_SKIP_TRACE
    fallback_error: Error | None = None
    source: Error | BaseException | None = None


OptionFn = Callable[[Options], Options]


def with_namespace(namespace: str) -> OptionFn:
    """Override the namespace of the produced error."""

    def _apply(options: Options) -> Options:
        return replace(options, namespace=namespace)

    return _apply


def with_metadata(metadata: Mapping[str, Any]) -> OptionFn:
    """Replace the whole metadata mapping (the mapping is copied)."""

    def _apply(options: Options) -> Options:
        return replace(options, metadata=dict(metadata))

    return _apply


def add_metadata(key: str, value: Any) -> OptionFn:
    """Add a single metadata entry on top of the metadata set so far."""

    def _apply(options: Options) -> Options:
        return replace(options, metadata={**options.metadata, key: value})

    return _apply


def skip_trace(skip: int) -> OptionFn:
    """Set how many frames above the caller of trace() to skip."""

    def _apply(options: Options) -> Options:
        return replace(options, skip_trace=skip)

    return _apply


def fallback_error(error: Error) -> OptionFn:
    """Set the fallback error of a Builder."""

    def _apply(options: Options) -> Options:
        return replace(options, fallback_error=error)

    return _apply


def source(error: Error | BaseException | None) -> OptionFn:
    """Set the causal error consumed by Error.trace()."""

    def _apply(options: Options) -> Options:
        return replace(options, source=error)

    return _apply


def evaluate_options(options: Iterable[OptionFn]) -> Options:
    """Fold option functions over the default Options.

    Args:
        options: Option functions, applied in order (later ones win).

    Returns:
        Options: Evaluated option set.
    """
    return reduce(lambda current, apply: apply(current), options, Options())
