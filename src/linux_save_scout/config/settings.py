"""
Application settings and configuration paths.
"""

from pathlib import Path
from typing import Optional
import os
import json

from linux_save_scout.config.roots import Root, Store


class Settings:
    """Application settings."""

    # Config directory (XDG compliant)
    CONFIG_DIR = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "lss"

    # Config file path (configured roots)
    CONFIG_FILE = CONFIG_DIR / "config.json"

    # Presence enables extra diagnostics for unrecognized games
    DEBUG_ENV = "LSS_DEBUG"

    # os.pathsep separated list of Heroic roots
    ROOTS_ENV = "LSS_ROOTS"

    # Heroic config root candidates (Flatpak first)
    HEROIC_CANDIDATES = [
        Path.home() / ".var" / "app" / "com.heroicgameslauncher.hgl" / "config" / "heroic",
        Path.home() / ".config" / "heroic",
    ]

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is not None:
            self.CONFIG_FILE = config_file
            self.CONFIG_DIR = config_file.parent

    def _load_config(self) -> dict:
        """Load config from file."""
        if self.CONFIG_FILE.exists():
            try:
                with open(self.CONFIG_FILE) as f:
                    config = json.load(f)
                if isinstance(config, dict):
                    return config
            except (json.JSONDecodeError, IOError):
                pass
        return {}

    def _save_config(self, config: dict) -> None:
        """Save config to file."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(self.CONFIG_FILE, "w") as f:
            json.dump(config, f, indent=2)

    def debug_enabled(self) -> bool:
        """Check whether the diagnostic toggle is set in the environment."""
        return self.DEBUG_ENV in os.environ

    def configured_roots(self) -> list[Root]:
        """Get roots saved in the config file."""
        entries = self._load_config().get("roots")
        if not isinstance(entries, list):
            return []

        roots = []
        for entry in entries:
            try:
                roots.append(Root.from_dict(entry))
            except (KeyError, TypeError):
                continue
        return roots

    def add_root(self, path: Path, store: Store = Store.HEROIC) -> bool:
        """Add a root to the config file. Returns False if already present."""
        root = Root(path=path.expanduser(), store=store)
        if root in self.configured_roots():
            return False
        config = self._load_config()
        if not isinstance(config.get("roots"), list):
            config["roots"] = []
        config["roots"].append(root.to_dict())
        self._save_config(config)
        return True

    def detect_heroic_roots(self) -> list[Root]:
        """Find Heroic config directories that exist on disk."""
        return [
            Root(path=path, store=Store.HEROIC)
            for path in self.HEROIC_CANDIDATES
            if path.is_dir()
        ]

    def get_roots(self, explicit: Optional[list[Path]] = None) -> list[Root]:
        """Get roots: explicit paths > LSS_ROOTS env > config file > auto-detect."""
        # 1. Explicit paths (CLI options) are always Heroic roots
        if explicit:
            return [Root(path=path.expanduser(), store=Store.HEROIC) for path in explicit]
        # 2. Environment variable
        env_roots = os.environ.get(self.ROOTS_ENV)
        if env_roots:
            return [
                Root(path=Path(part).expanduser(), store=Store.HEROIC)
                for part in env_roots.split(os.pathsep)
                if part
            ]
        # 3. Config file
        roots = self.configured_roots()
        if roots:
            return roots
        # 4. Whatever Heroic installs exist
        return self.detect_heroic_roots()


# Singleton instance
settings = Settings()
