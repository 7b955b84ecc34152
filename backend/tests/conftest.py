"""
Shared pytest fixtures for chainkit tests.

This module provides:
- quest / quests: A single NOT_STARTED quest and a quest map holding it
- quest_manager: QuestManager with the sample quest registered
- console_lines / debug_toolkit: DebugToolkit writing into tmp_path with
  a recording console sink and a fixed clock
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add backend to path for imports
backend_path = Path(__file__).parent.parent
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from chainkit.engine.debug import DebugToolkit  # noqa: E402
from chainkit.engine.quests import QuestManager  # noqa: E402
from chainkit.models.quest import Quest, QuestId  # noqa: E402


FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45)


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


# =============================================================================
# Quest Fixtures
# =============================================================================


@pytest.fixture
def quest() -> Quest:
    """A quest that has not been started yet."""
    return Quest(id=42, name="Find the treasure")


@pytest.fixture
def quests(quest) -> dict[QuestId, Quest]:
    """Quest map containing the sample quest."""
    return {quest.id: quest}


@pytest.fixture
def quest_manager(quest) -> QuestManager:
    """QuestManager with the sample quest registered."""
    manager = QuestManager()
    manager.register_quest(quest)
    return manager


# =============================================================================
# Debug Fixtures
# =============================================================================


@pytest.fixture
def console_lines() -> list[str]:
    """Recording console sink (append lines to this list)."""
    return []


@pytest.fixture
def log_file(tmp_path) -> Path:
    """Path of the debug log file inside tmp_path."""
    return tmp_path / "debug_log.txt"


@pytest.fixture
def debug_toolkit(tmp_path, log_file, console_lines) -> DebugToolkit:
    """DebugToolkit writing into tmp_path with a fixed clock."""
    return DebugToolkit(
        log_file_path=log_file,
        state_dir=tmp_path,
        console_sink=console_lines.append,
        clock=lambda: FIXED_TIME,
    )
