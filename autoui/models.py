"""
Core data models for AutoUI.
Defines data structures for the question schema, issue snapshots and evaluation results.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

SKIP_SENTINEL = "__SKIP__"

# Mapping from question key to answer text or SKIP_SENTINEL.
AnswerSet = Dict[str, str]


@dataclass
class Question:
    """A single questionnaire prompt."""

    key: str
    ask: str
    options: List[str] = field(default_factory=list)


@dataclass
class Section:
    """A named group of questions sharing intro text and links."""

    id: str
    title: str
    intro: str = ""
    links: List[str] = field(default_factory=list)
    questions: List[Question] = field(default_factory=list)


@dataclass
class QuestionSchema:
    """Ordered collection of sections."""

    sections: List[Section] = field(default_factory=list)

    def flatten(self) -> List[Tuple[Question, Section]]:
        """Questions paired with their owning section, in asking order."""
        return [
            (question, section)
            for section in self.sections
            for question in section.questions
        ]

    def keys(self) -> List[str]:
        return [question.key for question, _ in self.flatten()]

    def get_question(self, key: str) -> Optional[Question]:
        for question, _ in self.flatten():
            if question.key == key:
                return question
        return None


@dataclass
class IssueComment:
    """A comment on the questionnaire issue."""

    body: str
    author: str = ""
    created_at: Optional[str] = None


@dataclass
class IssueSnapshot:
    """Issue body and comments as fetched from the tracker."""

    number: int
    title: str = ""
    body: str = ""
    labels: List[str] = field(default_factory=list)
    comments: List[IssueComment] = field(default_factory=list)

    def has_label(self, label: str) -> bool:
        return label in self.labels

    def corpus(self) -> str:
        """Issue body followed by every comment body, blank-line separated."""
        parts = [self.body or ""]
        parts.extend(comment.body or "" for comment in self.comments)
        return "\n\n".join(parts)

    def last_human_comment(
        self, is_automation_author: Callable[[str], bool]
    ) -> Optional[str]:
        """Body of the newest comment not written by the automation."""
        for comment in reversed(self.comments):
            if not is_automation_author(comment.author):
                return comment.body or ""
        return None

    def awaiting_reply(self, is_automation_author: Callable[[str], bool]) -> bool:
        """True when the newest comment is not one the automation wrote."""
        return bool(self.comments) and not is_automation_author(self.comments[-1].author)


@dataclass
class EvaluationResult:
    """Outcome of one questionnaire evaluation."""

    answers: AnswerSet = field(default_factory=dict)
    complete: bool = False
    wants_skip: bool = False
    next_question: Optional[Question] = None
    next_section: Optional[Section] = None
    status_block: str = ""
    next_question_prompt: str = ""

    @property
    def pending_key(self) -> str:
        return self.next_question.key if self.next_question else ""

    @property
    def section_id(self) -> str:
        return self.next_section.id if self.next_section else ""

    @property
    def section_title(self) -> str:
        return self.next_section.title if self.next_section else ""

    @property
    def section_intro(self) -> str:
        return self.next_section.intro if self.next_section else ""

    @property
    def section_links(self) -> str:
        if not self.next_section:
            return ""
        return "\n".join(f"- {link}" for link in self.next_section.links)
