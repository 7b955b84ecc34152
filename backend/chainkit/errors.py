"""
Exception types raised by chainkit.

Only setup-time misuse raises. Message processing never lets an
exception escape to the caller of DebugToolkit.log() or
QuestManager.update_quest().
"""

from __future__ import annotations


class ChainConfigurationError(ValueError):
    """A chain was wired incorrectly (missing, repeated or misplaced processor)."""


class DuplicateQuestError(ValueError):
    """A quest with the same id is already registered."""

    def __init__(self, quest_id: object):
        super().__init__(f"Quest with id '{quest_id}' is already registered")
        self.quest_id = quest_id
