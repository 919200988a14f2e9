"""Core enums package.

Usage:
    from errx.core.enums import Environment
"""

from errx.core.enums.environment import Environment

__all__ = ["Environment"]
