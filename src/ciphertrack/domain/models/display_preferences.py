"""Display preferences domain model."""

from pydantic import BaseModel, ConfigDict


class DisplayPreferences(BaseModel):
    """The two display toggles persisted between sessions."""

    model_config = ConfigDict(frozen=True)

    dark_mode: bool = False
    compact_layout: bool = False

    def toggled_dark_mode(self) -> "DisplayPreferences":
        """Return a copy with dark mode flipped."""
        return self.model_copy(update={"dark_mode": not self.dark_mode})

    def toggled_compact_layout(self) -> "DisplayPreferences":
        """Return a copy with compact layout flipped."""
        return self.model_copy(update={"compact_layout": not self.compact_layout})
