"""
Quest models.

Quest records carry a small lifecycle state machine:

    NOT_STARTED --start--> IN_PROGRESS --complete--> COMPLETED
                                       --fail------> FAILED

COMPLETED and FAILED are terminal. Quest messages request one of the
three transitions and form a closed union discriminated by ``kind``.

Example:
    >>> quest = Quest(id=42, name="Find the treasure")
    >>> quest.state
    <QuestState.NOT_STARTED: 'not_started'>
    >>> manager.update_quest(StartQuestMessage(quest_id=42))
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

QuestId = Union[int, str, uuid.UUID]


def new_quest_id() -> uuid.UUID:
    """Mint a fresh unique quest id."""
    return uuid.uuid4()


class QuestState(str, Enum):
    """Lifecycle states of a quest."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class QuestTransition(str, Enum):
    """Transitions a quest message can request.

    Each transition is allowed from exactly one source state; see
    QUEST_TRANSITIONS.
    """

    START = "start"
    COMPLETE = "complete"
    FAIL = "fail"


# transition -> (required source state, target state)
QUEST_TRANSITIONS: dict[QuestTransition, tuple[QuestState, QuestState]] = {
    QuestTransition.START: (QuestState.NOT_STARTED, QuestState.IN_PROGRESS),
    QuestTransition.COMPLETE: (QuestState.IN_PROGRESS, QuestState.COMPLETED),
    QuestTransition.FAIL: (QuestState.IN_PROGRESS, QuestState.FAILED),
}


class Quest(BaseModel):
    """A tracked quest.

    Attributes:
        id: Unique quest identifier (key in the quest map)
        name: Display name
        state: Current lifecycle state
    """

    id: QuestId
    name: str
    state: QuestState = QuestState.NOT_STARTED

    model_config = {"validate_assignment": True}


class _QuestMessageBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    quest_id: QuestId


class StartQuestMessage(_QuestMessageBase):
    """Request to start a quest."""

    kind: Literal["start"] = "start"


class CompleteQuestMessage(_QuestMessageBase):
    """Request to complete a quest in progress."""

    kind: Literal["complete"] = "complete"


class FailQuestMessage(_QuestMessageBase):
    """Request to fail a quest in progress."""

    kind: Literal["fail"] = "fail"


QuestMessage = Annotated[
    Union[StartQuestMessage, CompleteQuestMessage, FailQuestMessage],
    Field(discriminator="kind"),
]
