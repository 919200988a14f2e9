"""Call-site resolvers implementing CallSiteResolverProtocol."""

from errx.infrastructure.tracing.frame_resolver import FrameCallSiteResolver

__all__ = ["FrameCallSiteResolver"]
