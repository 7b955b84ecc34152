"""
Data models for chainkit.

- `dispatch.py`: HandlerResult, DispatchTrace and result factories
- `debug.py`: Debug pipeline messages and demo payloads
- `quest.py`: Quest records, states and quest pipeline messages
"""

from chainkit.models.debug import (
    DebugMessage,
    GeneralMessage,
    PlayerData,
    StateSaveMessage,
    Vector3,
)
from chainkit.models.dispatch import DispatchTrace, HandlerResult, consume, forward
from chainkit.models.quest import (
    QUEST_TRANSITIONS,
    CompleteQuestMessage,
    FailQuestMessage,
    Quest,
    QuestId,
    QuestMessage,
    QuestState,
    QuestTransition,
    StartQuestMessage,
    new_quest_id,
)

__all__ = [
    "DebugMessage",
    "GeneralMessage",
    "PlayerData",
    "StateSaveMessage",
    "Vector3",
    "DispatchTrace",
    "HandlerResult",
    "consume",
    "forward",
    "QUEST_TRANSITIONS",
    "CompleteQuestMessage",
    "FailQuestMessage",
    "Quest",
    "QuestId",
    "QuestMessage",
    "QuestState",
    "QuestTransition",
    "StartQuestMessage",
    "new_quest_id",
]
