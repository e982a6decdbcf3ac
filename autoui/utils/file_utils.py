"""
File system utility functions for AutoUI.
Handles common file operations with proper error handling.
"""

from pathlib import Path

from autoui.exceptions import FileSystemError


class FileUtils:
    """Utility class for file system operations."""

    @staticmethod
    def read_file(file_path: str) -> str:
        """Read file content as string."""
        try:
            path = Path(file_path).expanduser()
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            raise FileSystemError(f"File not found: {file_path}")
        except OSError as e:
            raise FileSystemError(f"Failed to read file {file_path}", str(e))

    @staticmethod
    def write_file(file_path: str, content: str, create_dirs: bool = True) -> None:
        """Write content to file."""
        try:
            path = Path(file_path).expanduser()

            if create_dirs:
                path.parent.mkdir(parents=True, exist_ok=True)

            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise FileSystemError(f"Failed to write file {file_path}", str(e))

    @staticmethod
    def append_file(file_path: str, content: str) -> None:
        """Append content to file, creating it if missing."""
        try:
            with open(Path(file_path).expanduser(), "a", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise FileSystemError(f"Failed to append to file {file_path}", str(e))
