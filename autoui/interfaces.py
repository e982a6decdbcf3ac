"""
Core interfaces and abstract base classes for AutoUI components.
Defines contracts for the issue tracker client and configuration management.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from autoui.models import IssueSnapshot


class IssueTrackerInterface(ABC):
    """Interface for the issue tracker the questionnaire runs in."""

    @abstractmethod
    def get_issue(self, number: int) -> Dict[str, Any]:
        """Fetch a single issue."""
        pass

    @abstractmethod
    def list_comments(self, number: int) -> List[Dict[str, Any]]:
        """Fetch every comment of an issue in chronological order."""
        pass

    @abstractmethod
    def create_comment(self, number: int, body: str) -> Dict[str, Any]:
        """Post a comment on an issue."""
        pass

    @abstractmethod
    def fetch_snapshot(self, number: int) -> IssueSnapshot:
        """Fetch issue and comments as an IssueSnapshot."""
        pass


class ConfigurationInterface(ABC):
    """Interface for configuration management."""

    @abstractmethod
    def load_config(self, config_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from file."""
        pass

    @abstractmethod
    def save_config(
        self, config: Dict[str, Any], config_path: Optional[str] = None
    ) -> None:
        """Save configuration to file."""
        pass

    @abstractmethod
    def get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values."""
        pass

    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration structure and values."""
        pass
