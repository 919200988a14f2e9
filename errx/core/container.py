"""Container module - Centralized dependency injection.

Composition root for the process-wide collaborators of the error model.
Factories are cached with lru_cache (application-scoped singletons); tests
call ``cache_clear()`` to rebuild them after patching settings.

Usage:
    from errx.core.container import get_call_site_resolver, get_logger
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from errx.core.config import settings

if TYPE_CHECKING:
    from errx.domain.protocols.call_site_resolver_protocol import (
        CallSiteResolverProtocol,
    )
    from errx.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from errx.infrastructure.logging.console_adapter import ConsoleAdapter

    env = (
        settings.environment.value
        if hasattr(settings.environment, "value")
        else str(settings.environment)
    )
    return ConsoleAdapter(use_json=env != "development", level=settings.log_level)


# ============================================================================
# Tracing (Application-Scoped)
# ============================================================================


@lru_cache()
def get_call_site_resolver() -> "CallSiteResolverProtocol":
    """Return the application-scoped call-site resolver singleton.

    Returns:
        CallSiteResolverProtocol: Resolver used by Error.trace().
    """
    from errx.infrastructure.tracing.frame_resolver import FrameCallSiteResolver

    return FrameCallSiteResolver(full_path=settings.trace_full_path)
