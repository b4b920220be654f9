"""Display preference storage."""

from ciphertrack.adapters.preferences.json_preferences_store import JsonPreferencesStore

__all__ = ["JsonPreferencesStore"]
