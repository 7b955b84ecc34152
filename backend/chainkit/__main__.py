#!/usr/bin/env python3
"""
chainkit demo runner.

Replays the two pipeline demos:
    python -m chainkit debug-demo
    python -m chainkit quest-demo
"""
import sys
import logging
from pathlib import Path

import click

from chainkit.config import get_log_level
from chainkit.engine.debug import DebugToolkit
from chainkit.engine.quests import QuestLoader, QuestManager
from chainkit.models.debug import GeneralMessage, PlayerData, StateSaveMessage, Vector3
from chainkit.models.quest import (
    CompleteQuestMessage,
    FailQuestMessage,
    Quest,
    StartQuestMessage,
    new_quest_id,
)


def setup_logging(debug: bool = False) -> None:
    """Configure root logging to stderr."""
    log_level = logging.DEBUG if debug else getattr(logging, get_log_level(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Leave existing handlers alone (embedding app or test harness)
    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        root_logger.addHandler(console_handler)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(debug: bool):
    """chainkit pipeline demos."""
    setup_logging(debug)


@cli.command('debug-demo')
@click.option('--log-file', default=None, help='Debug log file (default: CHAINKIT_LOG_FILE)')
@click.option('--state-dir', default='.', show_default=True, help='Directory for saved states')
def debug_demo(log_file: str | None, state_dir: str):
    """Log a message, save a player state, then log a null message."""
    toolkit = DebugToolkit(log_file_path=log_file, state_dir=state_dir)

    toolkit.log(GeneralMessage(text="Application started."))
    toolkit.log(StateSaveMessage(
        state_name="player_state",
        state_data=PlayerData(health=100, position=Vector3()),
    ))
    toolkit.log(None)


@cli.command('quest-demo')
@click.option(
    '--quests-file',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Load quests from this YAML file instead',
)
def quest_demo(quests_file: Path | None):
    """Register a quest, then start, complete and fail it."""
    manager = QuestManager()

    if quests_file:
        quests = QuestLoader(quests_file.parent).load_quests(quests_file.name)
    else:
        quests = [Quest(id=new_quest_id(), name="Find the treasure")]
    manager.register_quests(quests)

    for quest in quests:
        for message in (
            StartQuestMessage(quest_id=quest.id),
            CompleteQuestMessage(quest_id=quest.id),
            FailQuestMessage(quest_id=quest.id),
        ):
            manager.update_quest(message)
        click.echo(f"{quest.name}: {manager.get_quest(quest.id).state.value}")


if __name__ == '__main__':
    cli()
