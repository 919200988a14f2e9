"""Core shared kernel.

This module provides foundational utilities used by the error model:
- Settings (environment-driven configuration)
- Constants (well-known codes, display prefixes)
- Container (cached logger and call-site resolver factories)

The core module has NO dependencies on the domain layer.
"""

from errx.core.config import Settings, get_settings
from errx.core.enums import Environment

__all__ = ["Environment", "Settings", "get_settings"]
