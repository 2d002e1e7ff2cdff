"""
Resolve the game a Heroic-wrapped process belongs to.

Heroic (2.9.2 and later) exports these to the processes it launches:

    HEROIC_APP_NAME    the store ID, not the human-friendly title
    HEROIC_APP_RUNNER  one of: gog, legendary, nile, sideload
    HEROIC_APP_SOURCE  one of: gog, epic, amazon, sideload

Only HEROIC_APP_NAME and HEROIC_APP_RUNNER are used.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence, Union

from linux_save_scout.config.roots import Root, Store
from linux_save_scout.heroic.library import (
    get_gog_library,
    get_legendary_installed_games,
)
from linux_save_scout.logging_config import get_logger

logger = get_logger("wrap.heroic")

ENV_APP_NAME = "HEROIC_APP_NAME"
ENV_APP_RUNNER = "HEROIC_APP_RUNNER"
ENV_APP_SOURCE = "HEROIC_APP_SOURCE"


class HeroicRunner(Enum):
    """Runners Heroic can launch a game through."""
    GOG = "gog"
    LEGENDARY = "legendary"
    NILE = "nile"
    SIDELOAD = "sideload"


@dataclass(frozen=True)
class UnknownRunner:
    """A runner value we do not recognize."""
    value: str


Runner = Union[HeroicRunner, UnknownRunner]


def parse_runner(value: str) -> Runner:
    """Parse a HEROIC_APP_RUNNER value."""
    try:
        return HeroicRunner(value)
    except ValueError:
        return UnknownRunner(value)


def _find_in_root(root: Root, game_id: str, runner: HeroicRunner) -> Optional[str]:
    if runner == HeroicRunner.GOG:
        records = get_gog_library(root)
    elif runner == HeroicRunner.LEGENDARY:
        records = get_legendary_installed_games(root)
    else:
        return None

    for record in records:
        if record.app_name == game_id:
            return record.title
    return None


def find_in_roots(roots: Sequence[Root], game_id: str, game_runner: Union[str, Runner]) -> Optional[str]:
    """
    Find the title of game ``game_id`` in the Heroic roots.

    Roots are tried in order and the first match wins. The title is returned
    as the launcher reports it, without canonical resolution.

    Args:
        roots: Configured roots; non-Heroic roots are skipped
        game_id: Store ID (HEROIC_APP_NAME)
        game_runner: Runner name or parsed runner (HEROIC_APP_RUNNER)

    Returns:
        Game title, or None if not found or the runner is unsupported
    """
    runner = parse_runner(game_runner) if isinstance(game_runner, str) else game_runner

    if isinstance(runner, UnknownRunner):
        logger.warning("Unknown heroic runner '%s'", runner.value)
        return None
    if runner in (HeroicRunner.NILE, HeroicRunner.SIDELOAD):
        logger.warning("Heroic runner '%s' not supported", runner.value)
        return None

    for root in roots:
        if root.store != Store.HEROIC:
            continue
        logger.debug("Checking root %s for %s (%s)", root.path, game_id, runner.value)
        title = _find_in_root(root, game_id, runner)
        if title is not None:
            return title

    return None


def parse_heroic_environment(
    roots: Sequence[Root],
    env: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Resolve the wrapped game from Heroic's environment variables, if set."""
    env = os.environ if env is None else env

    app_name = env.get(ENV_APP_NAME)
    if app_name is None:
        return None

    app_runner = env.get(ENV_APP_RUNNER)
    if app_runner is None:
        return None

    logger.debug(
        "Found %s=%s, %s=%s",
        ENV_APP_NAME,
        app_name,
        ENV_APP_RUNNER,
        app_runner,
    )

    return find_in_roots(roots, app_name, app_runner)
