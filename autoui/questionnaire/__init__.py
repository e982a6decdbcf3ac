"""
AutoUI Questionnaire Module

Issue-comment questionnaire: schema loading, answer extraction and persistence.
"""

from .engine import QuestionnaireEngine, is_skip_request, format_status_block
from .schema_loader import SchemaLoader
from .answer_store import AnswerStore
from .issue_parser import IssueParser, IssueParseReport, render_reply

__all__ = [
    "QuestionnaireEngine",
    "is_skip_request",
    "format_status_block",
    "SchemaLoader",
    "AnswerStore",
    "IssueParser",
    "IssueParseReport",
    "render_reply",
]
