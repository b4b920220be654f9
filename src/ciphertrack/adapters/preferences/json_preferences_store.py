"""JSON file store for display preferences."""

import logging
from pathlib import Path

from pydantic import ValidationError

from ciphertrack.domain.contracts.preferences_store import PreferencesStoreProtocol
from ciphertrack.domain.models.display_preferences import DisplayPreferences

logger = logging.getLogger(__name__)


class JsonPreferencesStore(PreferencesStoreProtocol):
    """Stores the dark mode and compact layout toggles in a JSON file."""

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Args:
            path: File to read and write. Parent directories are created on save.
        """
        self.path = Path(path).expanduser()

    def load(self) -> DisplayPreferences:
        """Load preferences; a missing or unreadable file yields defaults."""
        if not self.path.exists():
            return DisplayPreferences()

        try:
            return DisplayPreferences.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return DisplayPreferences()

    def save(self, preferences: DisplayPreferences) -> None:
        """Write preferences to the file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        logger.debug(f"Saved preferences to {self.path}: {preferences}")
