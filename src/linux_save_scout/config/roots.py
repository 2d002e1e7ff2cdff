"""
Configured game roots.

A root is a directory belonging to exactly one store, e.g. Heroic's
``~/.config/heroic`` data tree.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Store(Enum):
    """Store/launcher family a root belongs to."""
    HEROIC = "heroic"
    LEGENDARY = "legendary"
    STEAM = "steam"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> "Store":
        """Parse a store name, falling back to OTHER."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class Root:
    """A configured filesystem location for one store."""

    path: Path
    store: Store = Store.HEROIC

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"path": str(self.path), "store": self.store.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Root":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError(f"root entry must be an object, got {type(data).__name__}")
        store = data.get("store", "heroic")
        if not isinstance(store, str):
            raise TypeError(f"store must be a string, got {type(store).__name__}")
        return cls(
            path=Path(data["path"]).expanduser(),
            store=Store.parse(store),
        )
