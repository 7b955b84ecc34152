"""Unit tests for the quest pipeline processors.

Tests cover:
- Each processor forwards messages of other kinds
- Guarded transitions apply only from their single source state
- Failed guards and unknown ids are consumed without mutation
- Diagnostic context on the returned HandlerResult
"""

import logging

import pytest

from chainkit.engine.quests.processors import (
    CompleteQuestProcessor,
    FailQuestProcessor,
    StartQuestProcessor,
)
from chainkit.models.quest import (
    CompleteQuestMessage,
    FailQuestMessage,
    Quest,
    QuestState,
    StartQuestMessage,
)

ALL_STATES = list(QuestState)

CASES = [
    # processor, message type, source state, target state
    (StartQuestProcessor, StartQuestMessage, QuestState.NOT_STARTED, QuestState.IN_PROGRESS),
    (CompleteQuestProcessor, CompleteQuestMessage, QuestState.IN_PROGRESS, QuestState.COMPLETED),
    (FailQuestProcessor, FailQuestMessage, QuestState.IN_PROGRESS, QuestState.FAILED),
]


class TestQuestTransitions:
    """Guarded transitions for each processor."""

    @pytest.mark.parametrize("processor_cls, message_cls, source, target", CASES)
    def test_applies_from_source_state(
        self, processor_cls, message_cls, source, target, quest, quests
    ) -> None:
        quest.state = source

        result = processor_cls().process(message_cls(quest_id=quest.id), quests)

        assert quest.state == target
        assert result.consumed is True
        assert result.context == {
            "applied": True,
            "previous_state": source,
            "state": target,
        }

    @pytest.mark.parametrize("processor_cls, message_cls, source, target", CASES)
    def test_other_states_are_absorbed(
        self, processor_cls, message_cls, source, target, quest, quests
    ) -> None:
        """From any other state the message is consumed and nothing changes."""
        for state in ALL_STATES:
            if state == source:
                continue
            quest.state = state

            result = processor_cls().process(message_cls(quest_id=quest.id), quests)

            assert quest.state == state
            assert result.consumed is True
            assert result.context["applied"] is False
            assert result.context["reason"] == "invalid_transition"

    @pytest.mark.parametrize("processor_cls, message_cls, source, target", CASES)
    def test_unknown_id_is_consumed(
        self, processor_cls, message_cls, source, target, quest, quests
    ) -> None:
        result = processor_cls().process(message_cls(quest_id=999), quests)

        assert result.consumed is True
        assert result.context == {"applied": False, "reason": "unknown_quest"}
        assert quests == {quest.id: quest}
        assert quest.state == QuestState.NOT_STARTED

    @pytest.mark.parametrize("processor_cls, message_cls, source, target", CASES)
    def test_forwards_other_kinds(
        self, processor_cls, message_cls, source, target, quest, quests
    ) -> None:
        for other_cls in (StartQuestMessage, CompleteQuestMessage, FailQuestMessage):
            if other_cls is message_cls:
                continue

            result = processor_cls().process(other_cls(quest_id=quest.id), quests)

            assert result.consumed is False
        assert quest.state == QuestState.NOT_STARTED


class TestQuestProcessorLogging:
    """Informational logging for transitions."""

    def test_logs_successful_start(self, quest, quests, caplog) -> None:
        with caplog.at_level(logging.INFO):
            StartQuestProcessor().process(StartQuestMessage(quest_id=42), quests)

        assert "Quest 'Find the treasure' started." in caplog.text

    def test_logs_rejected_transition_as_info(self, quest, quests, caplog) -> None:
        with caplog.at_level(logging.INFO):
            CompleteQuestProcessor().process(CompleteQuestMessage(quest_id=42), quests)

        assert "cannot be completed. Current state: not_started" in caplog.text
        assert all(r.levelno < logging.WARNING for r in caplog.records)

    def test_logs_unknown_quest(self, quests, caplog) -> None:
        with caplog.at_level(logging.INFO):
            FailQuestProcessor().process(FailQuestMessage(quest_id="nope"), quests)

        assert "Quest with id 'nope' not found." in caplog.text

    def test_missing_context_treated_as_empty(self) -> None:
        result = StartQuestProcessor().process(StartQuestMessage(quest_id=1), None)

        assert result.consumed is True
        assert result.context["reason"] == "unknown_quest"


class TestQuestRecord:
    """Quest record defaults."""

    def test_defaults_to_not_started(self) -> None:
        assert Quest(id=1, name="x").state == QuestState.NOT_STARTED
