"""
Processors for the quest-state pipeline.

Run order (see QuestManager):
    StartQuestProcessor -> CompleteQuestProcessor -> FailQuestProcessor

Each processor owns one message kind. A message of another kind is
forwarded. A message of its own kind is always consumed, whether or
not the transition could be applied: starting an already started
quest, or addressing an unknown quest id, ends the dispatch quietly.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

from chainkit.engine.chain import BaseProcessor
from chainkit.models.dispatch import HandlerResult, consume
from chainkit.models.quest import (
    QUEST_TRANSITIONS,
    Quest,
    QuestId,
    QuestTransition,
)

logger = logging.getLogger(__name__)


class QuestTransitionProcessor(BaseProcessor):
    """Applies one guarded quest transition.

    Subclasses set ``transition``, which is both the state change they
    apply and the message kind they own, plus its past tense for logs.

    The context passed to process() is the quest map, keyed by quest id.
    Only the record addressed by the message is read or changed.
    """

    transition: QuestTransition
    past_tense: str

    def process(
        self,
        message: Any,
        context: MutableMapping[QuestId, Quest] | None = None,
    ) -> HandlerResult:
        logger.debug(f"{self.name}: Processing message of type {type(message).__name__}")

        if getattr(message, "kind", None) != self.transition.value:
            return super().process(message, context)

        quest = (context or {}).get(message.quest_id)
        if quest is None:
            logger.info(f"Quest with id '{message.quest_id}' not found.")
            return consume(applied=False, reason="unknown_quest")

        source, target = QUEST_TRANSITIONS[self.transition]
        previous_state = quest.state
        if previous_state != source:
            logger.info(
                f"Quest '{quest.name}' cannot be {self.past_tense}. "
                f"Current state: {previous_state.value}"
            )
            return consume(
                applied=False,
                reason="invalid_transition",
                state=previous_state,
            )

        quest.state = target
        logger.info(f"Quest '{quest.name}' {self.past_tense}.")
        return consume(applied=True, previous_state=previous_state, state=target)


class StartQuestProcessor(QuestTransitionProcessor):
    """NOT_STARTED -> IN_PROGRESS."""

    transition = QuestTransition.START
    past_tense = "started"


class CompleteQuestProcessor(QuestTransitionProcessor):
    """IN_PROGRESS -> COMPLETED."""

    transition = QuestTransition.COMPLETE
    past_tense = "completed"


class FailQuestProcessor(QuestTransitionProcessor):
    """IN_PROGRESS -> FAILED."""

    transition = QuestTransition.FAIL
    past_tense = "failed"
