"""
Heroic Library Scanner.

Turns a store's library records into a ``canonical title -> ResolvedGame``
mapping, resolving titles and save prefixes along the way.
"""

from pathlib import Path
from typing import Callable, Optional, Sequence

from rich.console import Console

from linux_save_scout.config.roots import Root
from linux_save_scout.games.models import Os, ResolvedGame
from linux_save_scout.heroic.library import (
    LibraryLoad,
    load_gog_library,
    load_legendary_installed,
    load_sideload_library,
)
from linux_save_scout.heroic.prefix import find_prefix
from linux_save_scout.logging_config import get_logger, log_trace
from linux_save_scout.titles import TitleFinder, TitleQuery

logger = get_logger("heroic.scanner")

PrefixFinder = Callable[[Path, str, str, str], Optional[Path]]


class LibraryScanner:
    """Scans one Heroic store library under a root."""

    def __init__(
        self,
        loader: Callable[[Root], LibraryLoad],
        store_label: str,
        debug: bool = False,
        console: Optional[Console] = None,
        prefix_finder: PrefixFinder = find_prefix,
    ):
        """
        Initialize scanner.

        Args:
            loader: Reads the store's manifest under a root
            store_label: Store name used in diagnostics (e.g. "GOG")
            debug: Print unrecognized games to the diagnostic console
            console: Rich console for diagnostics (stderr if None)
            prefix_finder: Save prefix lookup
        """
        self.loader = loader
        self.store_label = store_label
        self.debug = debug
        self.console = console or Console(stderr=True)
        self.prefix_finder = prefix_finder

    def title_index(self, records: Sequence) -> dict[str, str]:
        """
        Map app_name to display title.

        Stores whose display titles live apart from the install records
        override this; the default reads them off the records themselves.
        """
        return {record.app_name: record.title for record in records}

    def scan(self, root: Root, title_finder: TitleFinder) -> dict[str, ResolvedGame]:
        """
        Scan the store library under ``root``.

        Returns:
            Mapping of canonical title to ResolvedGame. Unrecognized games
            are skipped; a later record with the same title wins.
        """
        games: dict[str, ResolvedGame] = {}

        records = self.loader(root).records
        if not records:
            return games

        game_titles = self.title_index(records)

        for record in records:
            game_title = game_titles.get(record.app_name)
            if game_title is None:
                continue

            query = TitleQuery(names=[game_title], normalized=True)
            official_title = title_finder.find_one(query)
            if not official_title:
                log_trace(logger, "Ignoring unrecognized game: %s, app: %s", game_title, record.app_name)
                if self.debug:
                    self.console.print(
                        f"Ignoring unrecognized game from Heroic/{self.store_label}: "
                        f"{game_title} (app = {record.app_name})",
                        markup=False,
                        highlight=False,
                        soft_wrap=True,
                    )
                continue

            log_trace(
                logger,
                "Detected game: %s | app: %s, raw title: %s",
                official_title,
                record.app_name,
                game_title,
            )
            prefix = self.prefix_finder(
                root.path,
                game_title,
                record.platform.lower(),
                record.app_name,
            )

            games[official_title] = ResolvedGame(
                install_dir=Path(record.install_dir) if record.install_dir else None,
                prefix=prefix,
                platform=Os.from_platform(record.platform),
            )

        return games


def gog_scanner(debug: bool = False, console: Optional[Console] = None) -> LibraryScanner:
    """Scanner for ``gog_store/library.json``."""
    return LibraryScanner(load_gog_library, "GOG", debug=debug, console=console)


def sideload_scanner(debug: bool = False, console: Optional[Console] = None) -> LibraryScanner:
    """Scanner for ``sideload_apps/library.json``."""
    return LibraryScanner(load_sideload_library, "sideload", debug=debug, console=console)


def legendary_scanner(debug: bool = False, console: Optional[Console] = None) -> LibraryScanner:
    """Scanner for Legendary's ``installed.json``."""
    return LibraryScanner(load_legendary_installed, "Legendary", debug=debug, console=console)
