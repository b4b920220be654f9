"""Console display adapter."""

from ciphertrack.adapters.console.console_display_adapter import ConsoleDisplayAdapter

__all__ = ["ConsoleDisplayAdapter"]
