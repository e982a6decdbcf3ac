"""
Answer store for AutoUI.
Persists the collected questionnaire answers between workflow steps.
"""

import json
import os
from typing import Mapping, Optional

from autoui.exceptions import FileSystemError, InputError
from autoui.models import AnswerSet
from autoui.utils.logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_ANSWERS_PATH = "/tmp/autoui-answers.json"


class AnswerStore:
    """JSON file holding the question key to answer mapping."""

    def __init__(self, path: Optional[str] = None):
        self.path = os.path.expanduser(path or DEFAULT_ANSWERS_PATH)

    def load(self) -> AnswerSet:
        """Load stored answers; a missing file is an empty answer set."""
        if not os.path.exists(self.path):
            logger.debug(f"No answer store at {self.path}, starting empty")
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise InputError(f"Failed to parse answer store: {self.path}", str(e))
        except OSError as e:
            raise InputError(f"Failed to read answer store: {self.path}", str(e))

        if not isinstance(data, dict):
            raise InputError(
                "Invalid answer store structure", "Expected JSON object at root level"
            )

        return {str(key): str(value) for key, value in data.items() if value is not None}

    def save(self, answers: Mapping[str, str]) -> None:
        """Write answers, restoring the previous file if the write fails."""
        backup_path = f"{self.path}.backup"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            if os.path.exists(self.path):
                with open(self.path, "r", encoding="utf-8") as original:
                    with open(backup_path, "w", encoding="utf-8") as backup:
                        backup.write(original.read())

            with open(self.path, "w", encoding="utf-8") as file:
                json.dump(dict(answers), file, indent=2, ensure_ascii=False)

            if os.path.exists(backup_path):
                os.remove(backup_path)

        except OSError as e:
            if os.path.exists(backup_path):
                os.replace(backup_path, self.path)
            raise FileSystemError(f"Failed to write answer store: {self.path}", str(e))

        logger.info(f"Saved {len(answers)} answers to {self.path}")

    def merge_and_save(self, answers: Mapping[str, str]) -> AnswerSet:
        """Store prior answers updated with the given ones and return the result."""
        merged = self.load()
        merged.update(answers)
        self.save(merged)
        return merged

    def reset(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
            logger.info(f"Removed answer store {self.path}")
