"""Frame-based call-site resolver.

Implements CallSiteResolverProtocol with ``sys._getframe``, the same frame
lookup the standard ``logging`` module uses to find the caller of a log call.
"""

import os
import sys

from errx.core.constants import UNKNOWN_LOCATION


class FrameCallSiteResolver:
    """Resolve call sites from the interpreter's frame stack.

    Args:
        full_path: Render the absolute file path when True, the base name
            when False.
    """

    def __init__(self, *, full_path: bool = True) -> None:
        self._full_path = full_path

    def capture_location(self, frames_to_skip: int) -> str:
        """Describe the frame ``frames_to_skip`` levels above the caller.

        Args:
            frames_to_skip: 0 for the caller of this method, 1 for its caller...

        Returns:
            "<file>:<line>", or UNKNOWN_LOCATION when the stack is too shallow.
        """
        try:
            # +1 skips capture_location itself
            frame = sys._getframe(frames_to_skip + 1)
        except ValueError:
            return UNKNOWN_LOCATION

        filename = frame.f_code.co_filename
        if not self._full_path:
            filename = os.path.basename(filename)
        return f"{filename}:{frame.f_lineno}"
