"""One-shot viewport centering keyed on train identity."""


class ViewportCenteringTrigger:
    """Edge-triggered flag that fires once per distinct train.

    Background refreshes of the same train never re-fire it; it re-arms when
    the tracked train changes or is cleared.
    """

    def __init__(self) -> None:
        """Initialize with no train seen yet."""
        self._centered_on: str | None = None

    def should_center(self, entity_id: str | None, has_position: bool) -> bool:
        """Return True exactly once for each new entity with a known position."""
        if entity_id is None:
            self._centered_on = None
            return False
        if not has_position or entity_id == self._centered_on:
            return False
        self._centered_on = entity_id
        return True

    def reset(self) -> None:
        """Forget the current train so the next one centers again."""
        self._centered_on = None
