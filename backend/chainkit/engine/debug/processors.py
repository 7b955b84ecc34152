"""
Processors for the debug-message pipeline.

Run order (see DebugToolkit):
    NullCheckProcessor -> ConsoleLogProcessor -> FileLogProcessor -> StateSaveProcessor

Only NullCheckProcessor ever stops the chain. The logging and saving
processors are best-effort: a failed write is reported and the message
still moves on.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

from pydantic_core import PydanticSerializationError, to_jsonable_python

from chainkit.engine.chain import BaseProcessor
from chainkit.models.debug import StateSaveMessage
from chainkit.models.dispatch import HandlerResult, consume, forward

logger = logging.getLogger(__name__)

# Default console sink for ConsoleLogProcessor
console_logger = logging.getLogger("chainkit.console")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def public_fields(obj: Any) -> dict[str, Any]:
    """Serialize a plain object as its public instance attributes.

    Used as the pydantic fallback for payload types it has no serializer
    for. Objects without instance attributes are rejected.
    """
    if not hasattr(obj, "__dict__"):
        raise TypeError(f"Cannot serialize object of type {type(obj).__name__}")
    return {k: v for k, v in vars(obj).items() if not k.startswith("_")}


class NullCheckProcessor(BaseProcessor):
    """Stops messages that are missing or carry no text.

    This is the only processor in either pipeline that halts a dispatch.
    """

    def process(self, message: Any, context: Any = None) -> HandlerResult:
        if message is None or not getattr(message, "text", None):
            logger.error(f"{self.name}: Null message detected!")
            return consume(reason="null_message")

        return super().process(message, context)


class ConsoleLogProcessor(BaseProcessor):
    """Writes ``"ConsoleLogProcessor: <text>"`` to a console sink.

    Attributes:
        sink: Callable receiving each formatted line
    """

    def __init__(self, sink: Callable[[str], None] | None = None):
        """Initialize the console processor.

        Args:
            sink: Where lines go; defaults to the ``chainkit.console`` logger
        """
        self.sink = sink or console_logger.info

    def process(self, message: Any, context: Any = None) -> HandlerResult:
        try:
            self.sink(f"{self.name}: {message.text}")
        except Exception as e:
            logger.error(f"{self.name}: Console sink unavailable. Error: {e}")

        return super().process(message, context)


class FileLogProcessor(BaseProcessor):
    """Appends ``"<timestamp>: <text>"`` lines to a log file.

    Attributes:
        log_file_path: Path of the append-only log file
        clock: Returns the time used for each line's timestamp
    """

    def __init__(
        self,
        log_file_path: str | Path,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the file processor.

        Args:
            log_file_path: Path of the log file (parent dirs are created)
            clock: Time source, injectable for tests
        """
        self.log_file_path = Path(log_file_path)
        self.clock = clock

    def process(self, message: Any, context: Any = None) -> HandlerResult:
        try:
            timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
            self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file_path, "a", encoding="utf-8") as f:
                f.write(f"{timestamp}: {message.text}\n")
        except Exception as e:
            logger.error(f"{self.name}: Failed to write to log file. Error: {e}")

        return super().process(message, context)


class StateSaveProcessor(BaseProcessor):
    """Saves StateSaveMessage payloads as ``<state_name>_state.json``.

    Any existing file of the same name is overwritten. Other message
    kinds pass through untouched.

    Attributes:
        state_dir: Directory the JSON files are written to
    """

    def __init__(self, state_dir: str | Path = "."):
        """Initialize the state processor.

        Args:
            state_dir: Output directory (default: current directory)
        """
        self.state_dir = Path(state_dir)

    def state_file_path(self, state_name: str) -> Path:
        """Get the file a named state is saved to."""
        return self.state_dir / f"{state_name}_state.json"

    def process(self, message: Any, context: Any = None) -> HandlerResult:
        if not isinstance(message, StateSaveMessage):
            return super().process(message, context)

        file_path = self.state_file_path(message.state_name)
        try:
            data = json.dumps(
                to_jsonable_python(message.state_data, fallback=public_fields)
            )
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(data, encoding="utf-8")
        except (PydanticSerializationError, TypeError, ValueError, OSError) as e:
            logger.error(
                f"{self.name}: Failed to save state '{message.state_name}'. Error: {e}"
            )
            return forward(saved=False)

        logger.info(
            f"{self.name}: State '{message.state_name}' saved to '{file_path}'"
        )
        return forward(saved=True, path=str(file_path))
