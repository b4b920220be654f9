"""CipherTrack - live train status tracking."""

__version__ = "0.1.0"
