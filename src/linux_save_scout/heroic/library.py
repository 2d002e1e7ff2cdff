"""
Heroic Library Loader.

Reads the JSON manifests Heroic keeps for each store under its config root
and turns them into typed records. Missing or malformed manifests are not
errors: they are logged and yield an empty library.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from linux_save_scout.config.roots import Root
from linux_save_scout.logging_config import get_logger, log_trace

logger = get_logger("heroic.library")

# Manifest locations relative to a Heroic root, first existing file wins
GOG_LIBRARY_PATHS = [
    Path("gog_store") / "library.json",
    Path("store_cache") / "gog_library.json",
]
SIDELOAD_LIBRARY_PATHS = [
    Path("sideload_apps") / "library.json",
]
LEGENDARY_INSTALLED_PATHS = [
    Path("legendaryConfig") / "legendary" / "installed.json",
]


class Install(BaseModel):
    """Install metadata of a library entry."""
    model_config = ConfigDict(extra="ignore")

    platform: str


class LibraryRecord(BaseModel):
    """One entry of a ``games`` array (GOG and sideload libraries)."""
    model_config = ConfigDict(extra="ignore")

    # Opaque store ID, not the human-readable title
    app_name: str
    title: str
    install: Install
    folder_name: str

    @property
    def platform(self) -> str:
        return self.install.platform

    @property
    def install_dir(self) -> str:
        return self.folder_name


class Library(BaseModel):
    """``{"games": [...]}``"""
    model_config = ConfigDict(extra="ignore")

    games: list[LibraryRecord]


class LegendaryRecord(BaseModel):
    """One value of Legendary's ``installed.json`` mapping."""
    model_config = ConfigDict(extra="ignore")

    app_name: str
    title: str
    platform: str
    install_path: str

    @property
    def install_dir(self) -> str:
        return self.install_path


class LoadStatus(Enum):
    """Outcome of reading one manifest."""
    FOUND = "found"
    NOT_FOUND = "not_found"
    PARSE_FAILURE = "parse_failure"


R = TypeVar("R")


@dataclass
class LibraryLoad(Generic[R]):
    """Records read from a manifest plus how the read went."""
    status: LoadStatus
    path: Optional[Path] = None
    records: list[R] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == LoadStatus.FOUND


def find_manifest(root: Root, candidates: list[Path]) -> Optional[Path]:
    """Get the first existing manifest file under a root."""
    for relative in candidates:
        path = root.path / relative
        if path.is_file():
            return path
    return None


def _read_manifest(root: Root, candidates: list[Path], parse: Callable[[str], list]) -> LibraryLoad:
    path = find_manifest(root, candidates)
    if path is None:
        logger.warning("Could not find library in %s", root.path)
        return LibraryLoad(status=LoadStatus.NOT_FOUND)

    try:
        records = parse(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # pydantic's ValidationError and json.JSONDecodeError are ValueErrors
        logger.warning("Unable to parse library in %s: %s", path, e)
        return LibraryLoad(status=LoadStatus.PARSE_FAILURE, path=path, error=str(e))

    log_trace(logger, "Found %d games in %s", len(records), path)
    return LibraryLoad(status=LoadStatus.FOUND, path=path, records=records)


def _parse_library(content: str) -> list[LibraryRecord]:
    return Library.model_validate_json(content).games


def _parse_legendary(content: str) -> list[LegendaryRecord]:
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object keyed by app name")
    records = []
    for app_name, entry in data.items():
        if isinstance(entry, dict):
            entry = {"app_name": app_name, **entry}
        try:
            records.append(LegendaryRecord.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"entry {app_name!r}: {e}") from e
    return records


def load_gog_library(root: Root) -> LibraryLoad[LibraryRecord]:
    """Load the GOG library (``gog_store/library.json``)."""
    return _read_manifest(root, GOG_LIBRARY_PATHS, _parse_library)


def load_sideload_library(root: Root) -> LibraryLoad[LibraryRecord]:
    """Load sideloaded apps (``sideload_apps/library.json``)."""
    return _read_manifest(root, SIDELOAD_LIBRARY_PATHS, _parse_library)


def load_legendary_installed(root: Root) -> LibraryLoad[LegendaryRecord]:
    """Load installed Epic games managed through Legendary."""
    return _read_manifest(root, LEGENDARY_INSTALLED_PATHS, _parse_legendary)


def get_gog_library(root: Root) -> list[LibraryRecord]:
    """Get GOG library records, empty on any failure."""
    return load_gog_library(root).records


def get_sideload_library(root: Root) -> list[LibraryRecord]:
    """Get sideloaded app records, empty on any failure."""
    return load_sideload_library(root).records


def get_legendary_installed_games(root: Root) -> list[LegendaryRecord]:
    """Get installed Legendary games, empty on any failure."""
    return load_legendary_installed(root).records
