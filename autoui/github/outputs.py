"""
GitHub Actions step outputs for AutoUI.
"""

import os
import uuid
from typing import Any, Dict, Optional

import click

from autoui.utils.file_utils import FileUtils
from autoui.utils.logging_utils import get_logger

logger = get_logger(__name__)


class ActionOutputs:
    """Collects named outputs and writes them for the calling workflow."""

    def __init__(self, output_file: Optional[str] = None):
        self.output_file = output_file or os.environ.get("GITHUB_OUTPUT")
        self.values: Dict[str, str] = {}

    @staticmethod
    def render(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def set_output(self, name: str, value: Any) -> None:
        self.values[name] = self.render(value)

    def update(self, values: Dict[str, Any]) -> None:
        for name, value in values.items():
            self.set_output(name, value)

    def flush(self) -> None:
        """Append all outputs to the output file, or echo them to stdout."""
        if not self.output_file:
            for name, value in self.values.items():
                click.echo(f"{name}={value}")
            return

        chunks = []
        for name, value in self.values.items():
            delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
            chunks.append(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

        FileUtils.append_file(self.output_file, "".join(chunks))
        logger.info(f"Wrote {len(self.values)} outputs to {self.output_file}")
