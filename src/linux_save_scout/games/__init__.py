"""Game data models."""

from linux_save_scout.games.models import Os, ResolvedGame

__all__ = [
    "Os",
    "ResolvedGame",
]
