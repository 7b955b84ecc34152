"""
Protocol definitions for the chain-of-responsibility engine.

A chain is an ordered sequence of processors. Each processor inspects
a message (and an optional shared context), may act on it, and tells
the chain whether to forward the message or stop.

Component Flow:
    caller -> Dispatcher (DebugToolkit / QuestManager)
                  |
                  v
            Chain.process(message, context)
                  |
                  v
        processor 1 -> processor 2 -> ... -> processor N
        (stops at the first processor that consumes the message)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chainkit.models.dispatch import HandlerResult


@runtime_checkable
class Processor(Protocol):
    """Protocol for a single link in a chain.

    Implementations return a HandlerResult: ``forward()`` to pass the
    message on, ``consume(...)`` to end the dispatch. Processors must not
    hold a reference to the next processor; ordering belongs to the Chain.

    Example implementations:
        - NullCheckProcessor: stops empty debug messages
        - StartQuestProcessor: consumes start requests for quests
    """

    @property
    def name(self) -> str:
        """Name used in logs and dispatch traces."""
        ...

    def process(self, message: Any, context: Any = None) -> "HandlerResult":
        """Handle one message.

        Args:
            message: The message being dispatched (may be None)
            context: Shared state for this dispatch, if the chain uses any

        Returns:
            HandlerResult telling the chain whether to continue
        """
        ...
