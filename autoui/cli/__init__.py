"""
CLI interface module for AutoUI.
Handles command-line interface and workflow step commands.
"""

from .main import cli, main
from .commands import (
    ParseIssueCommand,
    CommentCommand,
    EvaluateCommand,
    GenerateCommand,
)

__all__ = [
    "cli",
    "main",
    "ParseIssueCommand",
    "CommentCommand",
    "EvaluateCommand",
    "GenerateCommand",
]
