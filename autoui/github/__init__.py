"""
AutoUI GitHub Module

Issue tracker client and workflow step outputs.
"""

from .client import GitHubClient
from .outputs import ActionOutputs

__all__ = [
    "GitHubClient",
    "ActionOutputs",
]
