"""Pollers driving periodic refreshes."""

from ciphertrack.adapters.pollers.polling_timer import PollingTimer

__all__ = ["PollingTimer"]
