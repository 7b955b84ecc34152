"""
Debug toolkit - dispatcher for the debug-message pipeline.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

from chainkit.config import get_log_file_path
from chainkit.engine.chain import Chain, ChainBuilder
from chainkit.engine.debug.processors import (
    ConsoleLogProcessor,
    FileLogProcessor,
    NullCheckProcessor,
    StateSaveProcessor,
)
from chainkit.models.debug import DebugMessage
from chainkit.models.dispatch import DispatchTrace


class DebugToolkit:
    """Routes debug messages through the debug chain.

    Chain order: NullCheck -> ConsoleLog -> FileLog -> StateSave.
    log() never raises; failures inside the chain are logged instead.

    Attributes:
        log_file_path: Where FileLogProcessor appends lines
        chain: The built processor chain

    Example:
        >>> toolkit = DebugToolkit(log_file_path="debug_log.txt")
        >>> toolkit.log(GeneralMessage(text="Application started."))
        >>> toolkit.log(None)  # reported, nothing written
    """

    def __init__(
        self,
        log_file_path: str | Path | None = None,
        state_dir: str | Path = ".",
        console_sink: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Build the debug chain.

        Args:
            log_file_path: Log file path (default: CHAINKIT_LOG_FILE or debug_log.txt)
            state_dir: Directory for ``<name>_state.json`` files
            console_sink: Console line sink (default: chainkit.console logger)
            clock: Time source for log timestamps
        """
        self.log_file_path = Path(log_file_path or get_log_file_path())

        builder = ChainBuilder(NullCheckProcessor())
        tail = builder.link(builder.head, ConsoleLogProcessor(console_sink))
        tail = builder.link(tail, FileLogProcessor(self.log_file_path, clock=clock))
        builder.link(tail, StateSaveProcessor(state_dir))
        self.chain: Chain = builder.build()

    def log(self, message: DebugMessage | None) -> DispatchTrace:
        """Dispatch a debug message.

        Args:
            message: The message to log, or None

        Returns:
            DispatchTrace of the dispatch
        """
        return self.chain.process(message)
