"""
Quest loader - Load quest definitions from YAML files
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from chainkit.models.quest import Quest


class QuestLoader:
    """Loads quest definitions from YAML files.

    Expected file layout::

        quests:
          - id: 42
            name: Find the treasure
          - id: rescue-the-smith
            name: Rescue the smith
            state: in_progress
    """

    def __init__(self, quests_dir: str | Path = "quests"):
        """Initialize with quests directory path"""
        self.quests_dir = Path(quests_dir)

    def list_quest_files(self) -> list[str]:
        """List quest file names (without extension) in the quests directory"""
        if not self.quests_dir.exists():
            return []

        return sorted(
            path.stem
            for path in self.quests_dir.iterdir()
            if path.is_file() and path.suffix in (".yaml", ".yml")
        )

    def load_quests(self, name: str) -> list[Quest]:
        """
        Load quests from a YAML file.

        Args:
            name: File name in the quests directory, with or without extension

        Returns:
            List of Quest records in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is malformed
        """
        path = self._resolve(name)

        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        entries = data.get("quests", []) if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ValueError(f"{path}: 'quests' must be a list")

        quests = []
        for index, entry in enumerate(entries):
            try:
                quests.append(Quest.model_validate(entry))
            except ValidationError as e:
                raise ValueError(f"{path}: invalid quest at index {index}: {e}") from e

        return quests

    def _resolve(self, name: str) -> Path:
        candidates = [self.quests_dir / name]
        if not Path(name).suffix:
            candidates += [
                self.quests_dir / f"{name}.yaml",
                self.quests_dir / f"{name}.yml",
            ]

        for path in candidates:
            if path.is_file():
                return path

        raise FileNotFoundError(f"Quest file not found: {candidates[-1]}")
