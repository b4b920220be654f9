"""Next stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NextStop:
    """The next scheduled halt as reported by the live-status source."""

    name: str
    eta_text: str
