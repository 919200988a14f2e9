"""Utility functions for testing.

Provides helpers for asserting on trace entries.
"""

import sys


def here() -> str:
    """Return the caller's location in trace entry format.

    Call it on the same line as the traced call so both report the same line:
        err, expected = NOT_FOUND.trace(), here()

    Returns:
        "<file>:<line>" of the calling line.
    """
    frame = sys._getframe(1)
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"
