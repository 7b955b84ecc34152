"""
Quest-state pipeline.

- `processors.py`: Start, Complete and Fail quest processors
- `manager.py`: QuestManager, the dispatcher that owns the quest map
- `loader.py`: QuestLoader for YAML quest definitions
"""

from chainkit.engine.quests.loader import QuestLoader
from chainkit.engine.quests.manager import QuestManager
from chainkit.engine.quests.processors import (
    CompleteQuestProcessor,
    FailQuestProcessor,
    QuestTransitionProcessor,
    StartQuestProcessor,
)

__all__ = [
    "QuestLoader",
    "QuestManager",
    "CompleteQuestProcessor",
    "FailQuestProcessor",
    "QuestTransitionProcessor",
    "StartQuestProcessor",
]
