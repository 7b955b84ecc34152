"""
chainkit - chain-of-responsibility pipelines for a game engine.

- `engine/`: Generic chain dispatch plus the debug and quest pipelines
- `models/`: Message, quest and dispatch models
- `config.py`: Environment configuration
- `errors.py`: Exception types
"""

from chainkit.engine.debug import DebugToolkit
from chainkit.engine.quests import QuestLoader, QuestManager

__version__ = "0.1.0"

__all__ = ["DebugToolkit", "QuestLoader", "QuestManager", "__version__"]
