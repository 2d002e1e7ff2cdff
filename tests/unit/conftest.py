"""Shared fixtures: fake Heroic config directories on disk."""

import pytest

from linux_save_scout.config.roots import Root, Store

from helpers import write_json


@pytest.fixture
def heroic_root(tmp_path) -> Root:
    """An empty Heroic root."""
    path = tmp_path / "heroic"
    path.mkdir()
    return Root(path=path, store=Store.HEROIC)


@pytest.fixture
def make_heroic_root(tmp_path):
    """Factory for named Heroic roots with optional GOG/Legendary data."""

    def _make(name: str, gog_games=None, legendary=None, store: Store = Store.HEROIC) -> Root:
        path = tmp_path / name
        path.mkdir()
        if gog_games is not None:
            write_json(path / "gog_store" / "library.json", {"games": gog_games})
        if legendary is not None:
            write_json(path / "legendaryConfig" / "legendary" / "installed.json", legendary)
        return Root(path=path, store=store)

    return _make
