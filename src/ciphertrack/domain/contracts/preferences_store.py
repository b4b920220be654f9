"""Protocol for persisting display preferences."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ciphertrack.domain.models.display_preferences import DisplayPreferences


class PreferencesStoreProtocol(Protocol):
    """Protocol for loading and saving the display toggles."""

    def load(self) -> "DisplayPreferences":
        """Load stored preferences, falling back to defaults."""
        ...

    def save(self, preferences: "DisplayPreferences") -> None:
        """Persist preferences."""
        ...
