"""
Generic chain-of-responsibility dispatch.

This module provides the pieces shared by every pipeline:
    - BaseProcessor: default processor that forwards everything
    - ChainBuilder: links processors in run order, rejecting misuse
    - Chain: immutable processor sequence that dispatches messages
    - build_chain(): convenience wrapper around ChainBuilder

Example:
    >>> chain = build_chain(
    ...     StartQuestProcessor(),
    ...     CompleteQuestProcessor(),
    ...     FailQuestProcessor(),
    ... )
    >>> trace = chain.process(StartQuestMessage(quest_id=42), quests)
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from chainkit.errors import ChainConfigurationError
from chainkit.models.dispatch import DispatchTrace, HandlerResult, forward

if TYPE_CHECKING:
    from chainkit.engine.protocols import Processor

logger = logging.getLogger(__name__)


class BaseProcessor:
    """Processor with the default behavior: forward unconditionally.

    Subclasses override process() and fall back to
    ``super().process(message, context)`` when they want to pass the
    message on untouched.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    def process(self, message: Any, context: Any = None) -> HandlerResult:
        return forward()

    def __repr__(self) -> str:
        return f"{self.name}()"


class Chain:
    """An ordered, immutable sequence of processors.

    Dispatch walks the processors in order and stops at the first one
    that consumes the message. An empty chain accepts every message and
    does nothing.

    Nothing raised by a processor escapes process(): an unexpected
    failure is logged, recorded on the trace, and ends the dispatch.

    Attributes:
        processors: The processors in run order
    """

    def __init__(self, processors: Iterable["Processor"] = ()):
        """Create a chain from processors in run order.

        Args:
            processors: Processors to run, head first

        Raises:
            ChainConfigurationError: If a processor is missing or repeated
        """
        processors = tuple(processors)
        seen: set[int] = set()
        for processor in processors:
            if processor is None:
                raise ChainConfigurationError("Cannot add a missing processor to a chain")
            if id(processor) in seen:
                raise ChainConfigurationError(
                    f"{_name_of(processor)} appears more than once in the chain"
                )
            seen.add(id(processor))
        self._processors = processors

    @property
    def processors(self) -> tuple["Processor", ...]:
        return self._processors

    @property
    def head(self) -> "Processor | None":
        return self._processors[0] if self._processors else None

    def __len__(self) -> int:
        return len(self._processors)

    def __iter__(self) -> Iterator["Processor"]:
        return iter(self._processors)

    def process(self, message: Any, context: Any = None) -> DispatchTrace:
        """Dispatch a message through the chain.

        Args:
            message: The message to dispatch (None is passed through as-is)
            context: Shared state handed to every processor unchanged

        Returns:
            DispatchTrace describing which processors ran and who stopped
        """
        trace = DispatchTrace()

        for processor in self._processors:
            name = _name_of(processor)
            trace.visited.append(name)

            try:
                result = processor.process(message, context)
            except Exception as e:
                logger.exception(
                    f"{name}: Unexpected error while processing {type(message).__name__}"
                )
                trace.error = f"{type(e).__name__}: {e}"
                break

            if result.consumed:
                trace.consumed_by = name
                trace.context = dict(result.context)
                break

        return trace


class ChainBuilder:
    """Links processors one after another into a Chain.

    ``link(processor, next_processor)`` returns ``next_processor`` so
    calls read in run order:

        >>> builder = ChainBuilder(NullCheckProcessor())
        >>> tail = builder.link(builder.head, ConsoleLogProcessor())
        >>> tail = builder.link(tail, FileLogProcessor("debug_log.txt"))
        >>> chain = builder.build()

    Misuse fails at setup time with ChainConfigurationError: linking a
    missing processor, linking a processor to itself, linking one that
    is already in the chain, or linking from anything but the tail.
    """

    def __init__(self, head: "Processor | None" = None):
        self._processors: list["Processor"] = []
        if head is not None:
            self._processors.append(head)

    @property
    def head(self) -> "Processor | None":
        return self._processors[0] if self._processors else None

    @property
    def tail(self) -> "Processor | None":
        return self._processors[-1] if self._processors else None

    def link(self, processor: "Processor", next_processor: "Processor") -> "Processor":
        """Append next_processor after processor.

        Args:
            processor: The current tail (or the head, on an empty builder)
            next_processor: The processor that runs after it

        Returns:
            next_processor, so links can be chained

        Raises:
            ChainConfigurationError: On any wiring mistake
        """
        if processor is None or next_processor is None:
            raise ChainConfigurationError("Cannot link a missing processor")
        if next_processor is processor:
            raise ChainConfigurationError(
                f"{_name_of(processor)} cannot be linked to itself"
            )

        if not self._processors:
            self._processors.append(processor)
        elif processor is not self.tail:
            raise ChainConfigurationError(
                f"Can only link after the tail ({_name_of(self.tail)}), "
                f"not {_name_of(processor)}"
            )

        if any(p is next_processor for p in self._processors):
            raise ChainConfigurationError(
                f"{_name_of(next_processor)} is already part of the chain"
            )

        self._processors.append(next_processor)
        return next_processor

    def build(self) -> Chain:
        """Freeze the linked processors into a Chain."""
        return Chain(self._processors)


def build_chain(*processors: "Processor") -> Chain:
    """Link processors in the given order and build the chain.

    Args:
        *processors: Processors in run order

    Returns:
        The built Chain (empty if no processors were given)
    """
    if not processors:
        return Chain()
    if processors[0] is None:
        raise ChainConfigurationError("Cannot link a missing processor")

    builder = ChainBuilder(processors[0])
    reduce(builder.link, processors)
    return builder.build()


def _name_of(processor: Any) -> str:
    return getattr(processor, "name", None) or type(processor).__name__
