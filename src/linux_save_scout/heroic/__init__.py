"""Heroic Games Launcher library scanning."""

from typing import Optional

from rich.console import Console

from linux_save_scout.config.roots import Root, Store
from linux_save_scout.games.models import ResolvedGame
from linux_save_scout.heroic.library import (
    LibraryLoad,
    LibraryRecord,
    LegendaryRecord,
    LoadStatus,
    get_gog_library,
    get_legendary_installed_games,
    get_sideload_library,
)
from linux_save_scout.heroic.prefix import find_prefix
from linux_save_scout.heroic.scanner import (
    LibraryScanner,
    gog_scanner,
    legendary_scanner,
    sideload_scanner,
)
from linux_save_scout.logging_config import get_logger
from linux_save_scout.titles import TitleFinder

logger = get_logger("heroic")


def scan_root(
    root: Root,
    title_finder: TitleFinder,
    debug: bool = False,
    console: Optional[Console] = None,
) -> dict[str, ResolvedGame]:
    """Scan every Heroic store under one root (GOG, Legendary, sideload)."""
    if root.store != Store.HEROIC:
        logger.warning("Skipping non-Heroic root %s (%s)", root.path, root.store.value)
        return {}

    games: dict[str, ResolvedGame] = {}
    for make_scanner in (gog_scanner, legendary_scanner, sideload_scanner):
        games.update(make_scanner(debug=debug, console=console).scan(root, title_finder))
    return games


def scan_roots(
    roots: list[Root],
    title_finder: TitleFinder,
    debug: bool = False,
    console: Optional[Console] = None,
) -> dict[str, ResolvedGame]:
    """Scan roots in order; a title found under a later root replaces earlier ones."""
    games: dict[str, ResolvedGame] = {}
    for root in roots:
        if root.store != Store.HEROIC:
            continue
        games.update(scan_root(root, title_finder, debug=debug, console=console))
    return games


__all__ = [
    "LibraryLoad",
    "LibraryRecord",
    "LegendaryRecord",
    "LoadStatus",
    "LibraryScanner",
    "find_prefix",
    "get_gog_library",
    "get_legendary_installed_games",
    "get_sideload_library",
    "gog_scanner",
    "legendary_scanner",
    "sideload_scanner",
    "scan_root",
    "scan_roots",
]
