"""CallSiteResolverProtocol definition for trace capture.

Abstracts call stack introspection so the error model never touches
interpreter internals directly. A resolver turns a frame depth into a
"<file>:<line>" trace entry.

Depth convention:
    frames_to_skip=0 names the function that called capture_location(),
    frames_to_skip=1 names that function's caller, and so on.

Usage:
    from errx.core.container import get_call_site_resolver

    resolver = get_call_site_resolver()
    location = resolver.capture_location(1)  # "/app/service.py:42"
"""

from typing import Protocol


class CallSiteResolverProtocol(Protocol):
    """Protocol for call-site resolvers."""

    def capture_location(self, frames_to_skip: int) -> str:
        """Describe a frame of the current call stack.

        Args:
            frames_to_skip: Frames to skip above the caller of this method.

        Returns:
            Location formatted as "<file>:<line>".
        """
        ...
