"""Helpers for building Heroic manifests in tests."""

import json
from pathlib import Path


def write_json(path: Path, data) -> Path:
    """Write ``data`` as JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def library_game(app_name: str, title: str, platform: str = "Windows", folder_name: str = "") -> dict:
    """A ``games[]`` entry as Heroic writes it."""
    return {
        "app_name": app_name,
        "title": title,
        "install": {"platform": platform, "install_path": f"/games/{folder_name or title}"},
        "folder_name": folder_name or title.replace(" ", ""),
        "is_installed": True,
    }


def games_config(app_name: str, wine_prefix: str, wine_type: str = "wine") -> dict:
    """A GamesConfig/<app_name>.json document."""
    return {
        app_name: {
            "winePrefix": wine_prefix,
            "wineVersion": {"bin": "/usr/bin/wine", "name": "Wine Default", "type": wine_type},
            "autoInstallDxvk": True,
        },
        "version": "v0",
        "explicit": True,
    }
