"""
Debug-message pipeline.

- `processors.py`: NullCheck, ConsoleLog, FileLog and StateSave processors
- `toolkit.py`: DebugToolkit, the dispatcher that owns the chain
"""

from chainkit.engine.debug.processors import (
    ConsoleLogProcessor,
    FileLogProcessor,
    NullCheckProcessor,
    StateSaveProcessor,
)
from chainkit.engine.debug.toolkit import DebugToolkit

__all__ = [
    "ConsoleLogProcessor",
    "FileLogProcessor",
    "NullCheckProcessor",
    "StateSaveProcessor",
    "DebugToolkit",
]
