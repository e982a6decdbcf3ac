"""
YAML utility functions for AutoUI.
Handles YAML (and JSON, which PyYAML also reads) documents with proper error handling.
"""

import yaml
from pathlib import Path
from typing import Any, Dict

from autoui.exceptions import FileSystemError


class YamlUtils:
    """Utility class for YAML operations."""

    @staticmethod
    def load_yaml(file_path: str) -> Any:
        """Load a YAML or JSON document and return parsed content."""
        path = Path(file_path).expanduser()
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except FileNotFoundError:
            raise FileSystemError(f"YAML file not found: {file_path}")
        except yaml.YAMLError as e:
            raise FileSystemError(f"Invalid YAML in file {file_path}", str(e))
        except OSError as e:
            raise FileSystemError(f"Error reading YAML file {file_path}", str(e))

    @staticmethod
    def dump_yaml_safe(data: Dict[str, Any]) -> str:
        """Convert data to YAML string safely."""
        try:
            return yaml.safe_dump(
                data, default_flow_style=False, indent=2, sort_keys=False
            )
        except yaml.YAMLError as e:
            raise FileSystemError("Error converting data to YAML string", str(e))
