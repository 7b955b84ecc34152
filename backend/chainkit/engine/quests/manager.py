"""
Quest manager - dispatcher for the quest-state pipeline.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from chainkit.engine.chain import Chain, build_chain
from chainkit.engine.quests.processors import (
    CompleteQuestProcessor,
    FailQuestProcessor,
    StartQuestProcessor,
)
from chainkit.errors import DuplicateQuestError
from chainkit.models.dispatch import DispatchTrace
from chainkit.models.quest import Quest, QuestId, QuestMessage

logger = logging.getLogger(__name__)


class QuestManager:
    """Tracks quests and routes quest updates through the quest chain.

    Chain order: Start -> Complete -> Fail. The quest map is owned by
    the manager and passed to the chain as the dispatch context.

    Example:
        >>> manager = QuestManager()
        >>> manager.register_quest(Quest(id=42, name="Find the treasure"))
        >>> manager.update_quest(StartQuestMessage(quest_id=42))
        >>> manager.get_quest(42).state
        <QuestState.IN_PROGRESS: 'in_progress'>
    """

    def __init__(self) -> None:
        self._quests: dict[QuestId, Quest] = {}
        self.chain: Chain = build_chain(
            StartQuestProcessor(),
            CompleteQuestProcessor(),
            FailQuestProcessor(),
        )

    @property
    def quests(self) -> Mapping[QuestId, Quest]:
        """Read-only view of registered quests by id."""
        return MappingProxyType(self._quests)

    def get_quest(self, quest_id: QuestId) -> Quest | None:
        return self._quests.get(quest_id)

    def register_quest(self, quest: Quest) -> None:
        """Add a quest to the manager.

        Args:
            quest: The quest to track

        Raises:
            DuplicateQuestError: If a quest with the same id is registered
        """
        if quest.id in self._quests:
            raise DuplicateQuestError(quest.id)
        self._quests[quest.id] = quest
        logger.debug(f"Registered quest '{quest.name}' ({quest.id})")

    def register_quests(self, quests: Iterable[Quest]) -> None:
        """Register several quests, stopping at the first duplicate."""
        for quest in quests:
            self.register_quest(quest)

    def update_quest(self, message: QuestMessage) -> DispatchTrace:
        """Dispatch a quest update through the chain.

        Invalid transitions and unknown ids are absorbed; the returned
        trace says whether anything changed (``trace.context["applied"]``).

        Args:
            message: The requested transition

        Returns:
            DispatchTrace of the dispatch
        """
        return self.chain.process(message, self._quests)
