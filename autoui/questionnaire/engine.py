"""
Questionnaire engine for AutoUI.
Extracts key=value answers from issue text and works out what to ask next.
"""

import re
from typing import Dict, Mapping, Optional, Pattern

from autoui.exceptions import InputError, SchemaError
from autoui.models import (
    SKIP_SENTINEL,
    AnswerSet,
    EvaluationResult,
    Question,
    QuestionSchema,
)
from autoui.utils.logging_utils import get_logger

logger = get_logger(__name__)

SKIP_REQUEST_PATTERN = re.compile(r"(^|\s)(skip|next)(\s|$)", re.IGNORECASE)

MISSING_MARKER = "❌"
SKIPPED_MARKER = "⏭️ skipped"
ANSWERED_MARKER = "✅"


def is_skip_request(text: Optional[str]) -> bool:
    """True when text contains 'skip' or 'next' as a standalone word."""
    if not text:
        return False
    return SKIP_REQUEST_PATTERN.search(text) is not None


def is_skipped(value: Optional[str]) -> bool:
    return value is not None and str(value).upper() == SKIP_SENTINEL


def format_status_block(schema: QuestionSchema, answers: Mapping[str, str]) -> str:
    """Render a markdown checklist of every question grouped by section."""
    blocks = []
    for section in schema.sections:
        lines = []
        for question in section.questions:
            value = answers.get(question.key)
            if not value:
                lines.append(f"- `{question.key}`: {MISSING_MARKER}")
            elif is_skipped(value):
                lines.append(f"- `{question.key}`: {SKIPPED_MARKER}")
            else:
                lines.append(f"- `{question.key}`: {ANSWERED_MARKER} {value}")
        blocks.append(f"### {section.title}\n" + "\n".join(lines))
    return "\n\n".join(blocks)


def format_question_prompt(question: Question) -> str:
    """Question text, its options and reply instructions."""
    options = ""
    if question.options:
        options = "\n\n**Options:**\n" + "\n".join(
            f"- {option}" for option in question.options
        )
    return (
        f"{question.ask}{options}\n\n"
        f"Reply with:\n- `{question.key}=...`\n- or `skip` / `next`"
    )


class QuestionnaireEngine:
    """Stateless evaluator for the issue questionnaire."""

    def evaluate(
        self,
        schema: QuestionSchema,
        corpus: str,
        prior_answers: Optional[Mapping[str, str]] = None,
        last_human_comment: Optional[str] = None,
    ) -> EvaluationResult:
        """Evaluate the questionnaire against the full issue text."""
        self.validate_schema(schema)

        if not isinstance(corpus, str):
            raise InputError(
                "Invalid corpus", f"expected text, got {type(corpus).__name__}"
            )
        if prior_answers is not None and not isinstance(prior_answers, Mapping):
            raise InputError(
                "Invalid prior answers",
                f"expected a mapping, got {type(prior_answers).__name__}",
            )

        extracted = self.extract_answers(schema, corpus)
        answers = self.merge_answers(schema, prior_answers or {}, extracted)

        next_pair = next(
            (
                (question, section)
                for question, section in schema.flatten()
                if not answers.get(question.key)
            ),
            None,
        )
        next_question, next_section = next_pair if next_pair else (None, None)

        result = EvaluationResult(
            answers=answers,
            complete=next_question is None,
            wants_skip=is_skip_request(last_human_comment),
            next_question=next_question,
            next_section=next_section,
            status_block=format_status_block(schema, answers),
            next_question_prompt=(
                format_question_prompt(next_question) if next_question else ""
            ),
        )

        logger.debug(
            f"Evaluated questionnaire: {len(answers)} answered, "
            f"pending={result.pending_key or '-'}, wants_skip={result.wants_skip}"
        )
        return result

    def validate_schema(self, schema: QuestionSchema) -> None:
        """Reject schemas whose question keys are not unique."""
        if not isinstance(schema, QuestionSchema):
            raise SchemaError(
                "Invalid schema", f"expected QuestionSchema, got {type(schema).__name__}"
            )

        seen = set()
        for key in schema.keys():
            if not key:
                raise SchemaError("Question key must not be empty")
            if key.lower() in seen:
                raise SchemaError("Duplicate question key", key)
            seen.add(key.lower())

    def build_patterns(self, schema: QuestionSchema) -> Dict[str, Pattern]:
        """Compile one answer-line pattern per question key."""
        return {
            key: re.compile(
                rf"^[ \t]*{re.escape(key)}[ \t]*[=:][ \t]*([^\r\n]*)",
                re.IGNORECASE | re.MULTILINE,
            )
            for key in schema.keys()
        }

    def extract_answers(self, schema: QuestionSchema, corpus: str) -> AnswerSet:
        """Scan the corpus; the last non-empty match for a key wins."""
        answers = {}
        for key, pattern in self.build_patterns(schema).items():
            values = [m.group(1).strip() for m in pattern.finditer(corpus)]
            values = [value for value in values if value]
            if values:
                answers[key] = values[-1]
        return answers

    def merge_answers(
        self,
        schema: QuestionSchema,
        prior_answers: Mapping[str, str],
        extracted: Mapping[str, str],
    ) -> AnswerSet:
        """Prior answers for known keys, overridden by freshly extracted ones."""
        known = set(schema.keys())
        merged = {
            key: str(value)
            for key, value in prior_answers.items()
            if key in known and value is not None
        }
        merged.update(extracted)
        return {key: merged[key] for key in schema.keys() if key in merged}
