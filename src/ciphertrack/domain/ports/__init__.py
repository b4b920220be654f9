"""Ports (interfaces) for the ports-and-adapters architecture."""

from ciphertrack.domain.ports.display_adapter import DisplayAdapter

__all__ = ["DisplayAdapter"]
