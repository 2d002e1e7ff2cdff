"""
Game data models shared by the library scanners.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Os(Enum):
    """Platform a game was installed for."""
    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "mac"
    OTHER = "other"

    @classmethod
    def from_platform(cls, platform: str) -> "Os":
        """Parse a launcher platform string ("Windows", "linux", "osx", ...)."""
        value = platform.strip().lower()
        if value == "windows":
            return cls.WINDOWS
        if value == "linux":
            return cls.LINUX
        if value in ("mac", "osx"):
            return cls.MAC
        return cls.OTHER


@dataclass
class ResolvedGame:
    """A detected game, keyed elsewhere by its canonical title."""

    install_dir: Optional[Path] = None
    prefix: Optional[Path] = None
    platform: Optional[Os] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "install_dir": str(self.install_dir) if self.install_dir else None,
            "prefix": str(self.prefix) if self.prefix else None,
            "platform": self.platform.value if self.platform else None,
        }
