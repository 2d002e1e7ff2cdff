"""
Canonical title resolution.

The scanners only depend on TitleFinder.find_one(); the real canonical game
database lives outside this package. CanonicalTitleFinder is a small
in-memory implementation used by the CLI and tests.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Protocol


@dataclass
class TitleQuery:
    """Candidate names for one game, tried in order."""

    names: list[str] = field(default_factory=list)
    normalized: bool = False


class TitleFinder(Protocol):
    """Anything that can map a TitleQuery to one canonical title."""

    def find_one(self, query: TitleQuery) -> Optional[str]:
        ...


def normalize_title(title: str) -> str:
    """Normalize a title for loose comparison."""
    s = title.lower()
    s = re.sub(r"[®™©]", "", s)
    s = re.sub(r"[-_:,.!?()'\"\[\]]", " ", s)
    return re.sub(r"\s+", " ", s).strip()


class CanonicalTitleFinder:
    """
    Resolve display names against a fixed list of canonical titles.

    Exact matches win. With ``query.normalized`` set, names are also compared
    after normalize_title(); a normalized form shared by more than one
    canonical title is ambiguous and never matches.

    If ``titles`` is None, every non-empty name is accepted as its own
    canonical title.
    """

    def __init__(self, titles: Optional[Iterable[str]] = None):
        self._accept_all = titles is None
        self._titles: set[str] = set()
        self._normalized: dict[str, set[str]] = {}
        for title in titles or []:
            self.add(title)

    def add(self, title: str) -> None:
        """Register a canonical title."""
        title = title.strip()
        if not title:
            return
        self._titles.add(title)
        self._normalized.setdefault(normalize_title(title), set()).add(title)

    @classmethod
    def from_file(cls, path: Path) -> "CanonicalTitleFinder":
        """Load canonical titles from a text file, one per line."""
        lines = path.read_text(encoding="utf-8").splitlines()
        return cls(line for line in lines if line.strip() and not line.startswith("#"))

    def __len__(self) -> int:
        return len(self._titles)

    def find_one(self, query: TitleQuery) -> Optional[str]:
        """Get the canonical title for the first name that matches, if any."""
        for name in query.names:
            name = name.strip()
            if not name:
                continue

            if self._accept_all:
                return name

            # Exact match
            if name in self._titles:
                return name

            if query.normalized:
                candidates = self._normalized.get(normalize_title(name), set())
                if len(candidates) == 1:
                    return next(iter(candidates))

        return None
