"""
Dispatch models for the chain-of-responsibility engine.

HandlerResult is what a single processor returns: whether it consumed
the message (ending the dispatch) and any diagnostic context about what
it did. DispatchTrace summarizes a complete dispatch through a chain.

Example:
    >>> # Pass-through processor
    >>> result = forward()
    >>> assert not result.consumed

    >>> # Processor that claimed the message
    >>> result = consume(applied=True, state="in_progress")
    >>> assert result.consumed
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HandlerResult(BaseModel):
    """Outcome of one processor handling one message.

    Attributes:
        consumed: True if the processor claimed the message and the chain
            must stop; False to forward to the next processor
        context: Diagnostic details (transition applied, file written, etc.)
    """

    consumed: bool = False
    context: dict[str, object] = Field(default_factory=dict)


class DispatchTrace(BaseModel):
    """Record of a message travelling through a chain.

    Attributes:
        visited: Names of the processors that saw the message, in order
        consumed_by: Name of the processor that stopped the chain, if any
        context: Diagnostic context reported by the consuming processor
        error: Description of an unexpected processor failure, if any

    Example:
        >>> trace = manager.update_quest(StartQuestMessage(quest_id=42))
        >>> trace.consumed_by
        'StartQuestProcessor'
        >>> trace.context["applied"]
        True
    """

    visited: list[str] = Field(default_factory=list)
    consumed_by: str | None = None
    context: dict[str, object] = Field(default_factory=dict)
    error: str | None = None

    @property
    def consumed(self) -> bool:
        """Whether some processor claimed the message."""
        return self.consumed_by is not None


# Convenience factory functions


def forward(**context: object) -> HandlerResult:
    """Create a result that passes the message on to the next processor.

    Args:
        **context: Optional diagnostic context

    Returns:
        HandlerResult with consumed=False
    """
    return HandlerResult(consumed=False, context=dict(context))


def consume(**context: object) -> HandlerResult:
    """Create a result that stops the chain.

    Args:
        **context: Diagnostic context describing what the processor did

    Returns:
        HandlerResult with consumed=True

    Example:
        >>> result = consume(applied=False, reason="unknown_quest")
        >>> assert result.consumed
    """
    return HandlerResult(consumed=True, context=dict(context))
