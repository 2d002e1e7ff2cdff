"""
Tests for the lss command line.
"""

import json

import pytest
from typer.testing import CliRunner

from linux_save_scout import cli
from linux_save_scout.cli import app

from helpers import library_game

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated(monkeypatch):
    """Keep CLI runs away from real logging setup and environment."""
    monkeypatch.setattr(cli, "setup_logging", lambda debug=False: None)
    monkeypatch.delenv("LSS_ROOTS", raising=False)
    monkeypatch.delenv("LSS_DEBUG", raising=False)
    for name in ("HEROIC_APP_NAME", "HEROIC_APP_RUNNER", "HEROIC_APP_SOURCE"):
        monkeypatch.delenv(name, raising=False)


class TestVersion:

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "Linux Save Scout" in result.stdout


class TestScanCommand:

    def test_scan_lists_games(self, make_heroic_root):
        root = make_heroic_root("heroic", gog_games=[
            library_game("1", "Foo Game", "linux"),
            library_game("2", "Bar Game", "linux"),
        ])

        result = runner.invoke(app, ["scan", "--root", str(root.path)])

        assert result.exit_code == 0
        assert "Foo Game" in result.stdout
        assert "Bar Game" in result.stdout
        assert "Total: 2 games" in result.stdout

    def test_scan_with_titles_file(self, make_heroic_root, tmp_path):
        root = make_heroic_root("heroic", gog_games=[
            library_game("1", "Foo Game", "linux"),
            library_game("2", "Homebrew", "linux"),
        ])
        titles = tmp_path / "titles.txt"
        titles.write_text("Foo Game\n", encoding="utf-8")

        result = runner.invoke(app, ["scan", "--root", str(root.path), "--titles", str(titles)])

        assert result.exit_code == 0
        assert "Total: 1 games" in result.stdout

    def test_scan_missing_titles_file(self, heroic_root, tmp_path):
        result = runner.invoke(app, ["scan", "--root", str(heroic_root.path), "--titles", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1

    def test_scan_empty_root(self, heroic_root):
        result = runner.invoke(app, ["scan", "--root", str(heroic_root.path)])
        assert result.exit_code == 0
        assert "No games found" in result.stdout


class TestResolveCommands:

    def test_resolve(self, make_heroic_root):
        root = make_heroic_root("heroic", gog_games=[library_game("1207658924", "Foo Game")])

        result = runner.invoke(app, ["resolve", "1207658924", "--runner", "gog", "--root", str(root.path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Foo Game"

    def test_resolve_not_found(self, make_heroic_root):
        root = make_heroic_root("heroic", gog_games=[library_game("1", "Foo Game")])
        result = runner.invoke(app, ["resolve", "2", "--runner", "gog", "--root", str(root.path)])
        assert result.exit_code == 1

    def test_wrap_env(self, make_heroic_root, monkeypatch):
        root = make_heroic_root("heroic", gog_games=[library_game("1", "Foo Game")])
        monkeypatch.setenv("HEROIC_APP_NAME", "1")
        monkeypatch.setenv("HEROIC_APP_RUNNER", "gog")

        result = runner.invoke(app, ["wrap-env", "--root", str(root.path)])

        assert result.exit_code == 0
        assert result.stdout.strip() == "Foo Game"

    def test_wrap_env_without_heroic(self, heroic_root):
        result = runner.invoke(app, ["wrap-env", "--root", str(heroic_root.path)])
        assert result.exit_code == 1


class TestRootsCommand:

    def test_add_and_list(self, tmp_path, monkeypatch):
        from linux_save_scout.config.settings import Settings

        settings = Settings(config_file=tmp_path / "config" / "config.json")
        monkeypatch.setattr(settings, "HEROIC_CANDIDATES", [])
        monkeypatch.setattr(cli, "settings", settings)
        heroic = tmp_path / "heroic"
        heroic.mkdir()

        added = runner.invoke(app, ["roots", "--add", str(heroic)])
        again = runner.invoke(app, ["roots", "--add", str(heroic)])
        listed = runner.invoke(app, ["roots"])

        assert added.exit_code == 0
        assert "Added" in added.stdout
        assert "already configured" in again.stdout
        assert listed.exit_code == 0
        assert "heroic" in listed.stdout


class TestScanDebugFlag:
    """Both --debug positions enable unrecognized-game diagnostics."""

    @pytest.fixture
    def scan_calls(self, monkeypatch):
        import linux_save_scout.heroic as heroic

        calls = []

        def fake_scan_roots(roots, title_finder, debug=False, console=None):
            calls.append(debug)
            return {}

        monkeypatch.setattr(heroic, "scan_roots", fake_scan_roots)
        return calls

    def test_global_debug_reaches_scan(self, heroic_root, scan_calls):
        result = runner.invoke(app, ["--debug", "scan", "--root", str(heroic_root.path)])
        assert result.exit_code == 0
        assert scan_calls == [True]

    def test_command_debug_reaches_scan(self, heroic_root, scan_calls):
        result = runner.invoke(app, ["scan", "--debug", "--root", str(heroic_root.path)])
        assert result.exit_code == 0
        assert scan_calls == [True]

    def test_env_debug_reaches_scan(self, heroic_root, scan_calls, monkeypatch):
        monkeypatch.setenv("LSS_DEBUG", "1")
        result = runner.invoke(app, ["scan", "--root", str(heroic_root.path)])
        assert result.exit_code == 0
        assert scan_calls == [True]

    def test_debug_off_by_default(self, heroic_root, scan_calls):
        result = runner.invoke(app, ["scan", "--root", str(heroic_root.path)])
        assert result.exit_code == 0
        assert scan_calls == [False]


class TestScanJson:
    """Machine-readable scan output."""

    def test_json_output(self, make_heroic_root):
        root = make_heroic_root("heroic", gog_games=[
            library_game("1", "Foo Game", "linux", "FooGame"),
        ])

        result = runner.invoke(app, ["scan", "--json", "--root", str(root.path)])

        assert result.exit_code == 0
        # Status lines and warnings go to stderr, which older click mixes in
        output = result.stdout
        data = json.loads(output[output.index("{"):])
        assert data == {
            "Foo Game": {"install_dir": "FooGame", "prefix": None, "platform": "linux"},
        }

    def test_json_output_empty(self, heroic_root):
        result = runner.invoke(app, ["scan", "--json", "--root", str(heroic_root.path)])

        assert result.exit_code == 0
        output = result.stdout
        assert json.loads(output[output.index("{"):]) == {}
