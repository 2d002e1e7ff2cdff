"""Game detection for wrapped launcher processes."""

from linux_save_scout.wrap.heroic import (
    HeroicRunner,
    UnknownRunner,
    find_in_roots,
    parse_heroic_environment,
    parse_runner,
)

__all__ = [
    "HeroicRunner",
    "UnknownRunner",
    "find_in_roots",
    "parse_heroic_environment",
    "parse_runner",
]
