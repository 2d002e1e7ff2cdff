"""
CLI interface for Linux Save Scout.

Commands:
    lss scan      - Scan Heroic roots for games and save prefixes
    lss resolve   - Look up the title of a Heroic app ID
    lss wrap-env  - Resolve the game from HEROIC_APP_* variables
    lss roots     - List or add configured roots
"""

import typer
from rich.console import Console
from rich.table import Table
from typing import List, Optional
from pathlib import Path

from linux_save_scout import __version__
from linux_save_scout.config.roots import Store
from linux_save_scout.config.settings import settings
from linux_save_scout.logging_config import setup_logging
from linux_save_scout.titles import CanonicalTitleFinder


app = typer.Typer(
    name="lss",
    help="Linux Save Scout - find Heroic games and their save prefixes",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Linux Save Scout[/bold blue] v{__version__}")
        raise typer.Exit()


def _load_title_finder(titles: Optional[Path], status: Console = console) -> CanonicalTitleFinder:
    """Load canonical titles from a file, or accept every title as-is."""
    if titles is None:
        return CanonicalTitleFinder()
    try:
        finder = CanonicalTitleFinder.from_file(titles)
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Cannot read titles file {titles}: {e}[/red]")
        raise typer.Exit(1)
    status.print(f"[dim]Loaded {len(finder)} canonical titles[/dim]")
    return finder


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Verbose logging to stderr (also enabled by LSS_DEBUG)",
    ),
) -> None:
    """
    Linux Save Scout - find Heroic games and their save prefixes.
    """
    ctx.ensure_object(dict)["debug"] = debug
    setup_logging(debug=debug or settings.debug_enabled())


@app.command()
def scan(
    ctx: typer.Context,
    root: Optional[List[Path]] = typer.Option(
        None,
        "--root",
        "-r",
        help="Heroic config directory (repeatable; configured roots if not specified)",
    ),
    titles: Optional[Path] = typer.Option(
        None,
        "--titles",
        "-t",
        help="File with one canonical title per line",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Report games that match no canonical title",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print results as JSON instead of a table",
    ),
) -> None:
    """
    Scan Heroic libraries for installed games.

    Shows each recognized game with its install folder, platform and prefix.
    """
    from linux_save_scout.heroic import scan_roots

    roots = settings.get_roots(root)
    if not roots:
        console.print("[yellow]No Heroic roots found.[/yellow]")
        console.print("Add one with 'lss roots --add PATH'.")
        raise typer.Exit(1)

    # Keep stdout clean for JSON output
    status = err_console if as_json else console
    title_finder = _load_title_finder(titles, status)
    debug = debug or (ctx.obj or {}).get("debug", False) or settings.debug_enabled()

    status.print("[bold]Scanning Heroic libraries...[/bold]")
    games = scan_roots(
        roots,
        title_finder,
        debug=debug,
        console=err_console,
    )

    if as_json:
        console.print_json(data={name: game.to_dict() for name, game in games.items()})
        return

    if not games:
        console.print("[yellow]No games found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Heroic Games")
    table.add_column("Title", style="white")
    table.add_column("Install Dir", style="cyan")
    table.add_column("Platform", style="green")
    table.add_column("Prefix", style="dim")

    for name in sorted(games):
        game = games[name]
        table.add_row(
            name,
            str(game.install_dir) if game.install_dir else "-",
            game.platform.value if game.platform else "-",
            str(game.prefix) if game.prefix else "-",
        )

    console.print(table)
    console.print(f"\nTotal: {len(games)} games")


@app.command()
def resolve(
    game_id: str = typer.Argument(..., help="Heroic app ID (HEROIC_APP_NAME)"),
    runner: str = typer.Option(
        ...,
        "--runner",
        help="Heroic runner: gog, legendary, nile, sideload",
    ),
    root: Optional[List[Path]] = typer.Option(
        None,
        "--root",
        "-r",
        help="Heroic config directory (repeatable)",
    ),
) -> None:
    """
    Look up the game title for a Heroic app ID.
    """
    from linux_save_scout.wrap.heroic import find_in_roots

    title = find_in_roots(settings.get_roots(root), game_id, runner)
    if title is None:
        console.print(f"[red]No game found for '{game_id}' ({runner})[/red]")
        raise typer.Exit(1)

    console.print(title, markup=False, highlight=False)


@app.command("wrap-env")
def wrap_env(
    root: Optional[List[Path]] = typer.Option(
        None,
        "--root",
        "-r",
        help="Heroic config directory (repeatable)",
    ),
) -> None:
    """
    Resolve the game from HEROIC_APP_NAME / HEROIC_APP_RUNNER.

    Meant to run inside a process launched by Heroic.
    """
    from linux_save_scout.wrap.heroic import parse_heroic_environment

    title = parse_heroic_environment(settings.get_roots(root))
    if title is None:
        console.print("[red]No Heroic game detected in environment[/red]")
        raise typer.Exit(1)

    console.print(title, markup=False, highlight=False)


@app.command()
def roots(
    add: Optional[Path] = typer.Option(
        None,
        "--add",
        "-a",
        help="Add a root directory",
    ),
    store: str = typer.Option(
        "heroic",
        "--store",
        "-s",
        help="Store of the added root: heroic, legendary, steam, other",
    ),
) -> None:
    """
    List or add configured roots.
    """
    if add is not None:
        if settings.add_root(add, Store.parse(store)):
            console.print(f"[green]✓ Added {add} ({Store.parse(store).value})[/green]")
        else:
            console.print(f"[yellow]{add} is already configured[/yellow]")
        return

    configured = settings.get_roots()
    if not configured:
        console.print("[yellow]No roots configured or detected.[/yellow]")
        return

    table = Table(title="Roots")
    table.add_column("Path", style="white")
    table.add_column("Store", style="cyan")
    table.add_column("Exists", style="green")

    for entry in configured:
        table.add_row(
            str(entry.path),
            entry.store.value,
            "yes" if entry.path.is_dir() else "[red]no[/red]",
        )

    console.print(table)


if __name__ == "__main__":
    app()
