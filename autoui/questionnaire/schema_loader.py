"""
Question schema loader for AutoUI.
Reads the sectioned question document and validates its structure.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from autoui.exceptions import FileSystemError, InputError, SchemaError
from autoui.models import Question, QuestionSchema, Section
from autoui.utils.logging_utils import get_logger
from autoui.utils.yaml_utils import YamlUtils

logger = get_logger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "templates" / "questions.json"


class SchemaLoader:
    """Builds a QuestionSchema from a JSON or YAML document."""

    def load(self, path: Optional[str] = None) -> QuestionSchema:
        """Load and validate the schema at path, or the bundled default."""
        schema_path = str(path or DEFAULT_SCHEMA_PATH)

        try:
            data = YamlUtils.load_yaml(schema_path)
        except FileSystemError as e:
            raise InputError(f"Cannot read question schema {schema_path}", e.details)

        schema = self.from_dict(data)
        logger.info(
            f"Loaded {len(schema.keys())} questions in {len(schema.sections)} "
            f"sections from {schema_path}"
        )
        return schema

    def from_dict(self, data: Any) -> QuestionSchema:
        if not isinstance(data, dict):
            raise SchemaError("Invalid schema structure", "Expected mapping at root level")

        sections_data = data.get("sections")
        if not isinstance(sections_data, list):
            raise SchemaError("Invalid schema structure", "'sections' must be a list")

        sections = [
            self._build_section(section_data, index)
            for index, section_data in enumerate(sections_data)
        ]
        schema = QuestionSchema(sections=sections)
        self._check_unique_keys(schema)
        return schema

    def _build_section(self, data: Any, index: int) -> Section:
        if not isinstance(data, dict):
            raise SchemaError(f"Section #{index + 1} must be a mapping")

        for field_name in ("id", "title"):
            if not data.get(field_name):
                raise SchemaError(f"Section #{index + 1} is missing '{field_name}'")

        questions_data = data.get("questions", [])
        if not isinstance(questions_data, list):
            raise SchemaError(f"Section '{data['id']}' questions must be a list")

        return Section(
            id=str(data["id"]),
            title=str(data["title"]),
            intro=str(data.get("intro") or ""),
            links=self._string_list(data.get("links"), f"section '{data['id']}' links"),
            questions=[
                self._build_question(question_data, data["id"])
                for question_data in questions_data
            ],
        )

    def _build_question(self, data: Any, section_id: str) -> Question:
        if not isinstance(data, dict):
            raise SchemaError(f"Question in section '{section_id}' must be a mapping")

        key = data.get("key")
        ask = data.get("ask")
        if not key or not isinstance(key, str):
            raise SchemaError(f"Question in section '{section_id}' is missing 'key'")
        if not ask:
            raise SchemaError(f"Question '{key}' is missing 'ask'")

        return Question(
            key=key.strip(),
            ask=str(ask),
            options=self._string_list(data.get("options"), f"question '{key}' options"),
        )

    @staticmethod
    def _string_list(value: Any, what: str) -> List[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise SchemaError(f"Invalid {what}", "Expected a list")
        return [str(item) for item in value]

    @staticmethod
    def _check_unique_keys(schema: QuestionSchema) -> None:
        seen: Dict[str, str] = {}
        for question, section in schema.flatten():
            key = question.key.lower()
            if key in seen:
                raise SchemaError(
                    "Duplicate question key",
                    f"'{question.key}' appears in sections "
                    f"'{seen[key]}' and '{section.id}'",
                )
            seen[key] = section.id
