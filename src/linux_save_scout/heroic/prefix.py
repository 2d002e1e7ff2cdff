"""
Wine/Proton prefix lookup for Heroic games.

Heroic stores per-game settings in ``GamesConfig/<app_name>.json``:

    {
        "<app_name>": {
            "winePrefix": "/home/user/Games/Heroic/Prefixes/Foo",
            "wineVersion": {"type": "proton", ...},
            ...
        },
        "version": "v0",
        "explicit": true
    }
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from linux_save_scout.logging_config import get_logger, log_trace

logger = get_logger("heroic.prefix")


class WineVersion(BaseModel):
    model_config = ConfigDict(extra="ignore")

    wine_type: str = Field(alias="type")


class GameConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    wine_prefix: str = Field(alias="winePrefix")
    wine_version: WineVersion = Field(alias="wineVersion")


class GameConfigFile(BaseModel):
    """Top level of a GamesConfig file; game entries land in model_extra."""
    model_config = ConfigDict(extra="allow")


def read_game_config(heroic_path: Path, app_name: str) -> Optional[GameConfig]:
    """Read the wine settings for one game, None if unavailable."""
    config_path = heroic_path / "GamesConfig" / f"{app_name}.json"
    try:
        data = GameConfigFile.model_validate_json(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        log_trace(logger, "Unable to read game config %s: %s", config_path, e)
        return None

    entry = (data.model_extra or {}).get(app_name)
    if entry is None:
        log_trace(logger, "No entry for %s in %s", app_name, config_path)
        return None

    try:
        return GameConfig.model_validate(entry)
    except ValidationError as e:
        # e.g. a native game with no wine settings
        log_trace(logger, "No wine settings for %s in %s: %s", app_name, config_path, e)
        return None


def find_prefix(heroic_path: Path, game_name: str, platform: str, app_name: str) -> Optional[Path]:
    """
    Find the save prefix of a Heroic game.

    Args:
        heroic_path: Heroic root directory
        game_name: Display title (diagnostics only)
        platform: Lower-cased platform string from the library
        app_name: Opaque store ID

    Returns:
        Prefix path, or None for native games and unknown setups
    """
    if platform == "windows":
        config = read_game_config(heroic_path, app_name)
        if config is None:
            return None

        wine_type = config.wine_version.wine_type
        if wine_type == "wine":
            log_trace(logger, "Found Heroic Wine prefix for %s (%s): %s", game_name, app_name, config.wine_prefix)
            return Path(config.wine_prefix)
        if wine_type == "proton":
            log_trace(logger, "Found Heroic Proton prefix for %s (%s): %s", game_name, app_name, config.wine_prefix)
            return Path(config.wine_prefix) / "pfx"

        log_trace(logger, "Found Heroic Windows game %s (%s) with unhandled wine type %s, ignoring", game_name, app_name, wine_type)
        return None

    if platform == "linux":
        log_trace(logger, "Found Heroic Linux game %s, ignoring", game_name)
        return None

    log_trace(logger, "Found Heroic game %s with unhandled platform %s, ignoring", game_name, platform)
    return None
