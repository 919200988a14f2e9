"""Domain protocols (ports) implemented by infrastructure adapters."""

from errx.domain.protocols.call_site_resolver_protocol import (
    CallSiteResolverProtocol,
)
from errx.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["CallSiteResolverProtocol", "LoggerProtocol"]
