"""Logging adapters implementing LoggerProtocol."""

from errx.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
