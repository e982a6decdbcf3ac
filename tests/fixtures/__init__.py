"""
Test fixtures for AutoUI testing.
"""

from .sample_issues import (
    SAMPLE_SCHEMA_DICT,
    BOT_LOGIN,
    FakeTracker,
    make_issue,
    make_comment,
)

__all__ = [
    "SAMPLE_SCHEMA_DICT",
    "BOT_LOGIN",
    "FakeTracker",
    "make_issue",
    "make_comment",
]
