"""Reads project files, degrading to placeholder text when a file is unreadable."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable

from .logging import get_logger

PLACEHOLDER_PREFIX = "// Error reading file:"


def placeholder_for(error: BaseException) -> str:
    """Return the marker embedded in place of a file that could not be read."""
    return f"{PLACEHOLDER_PREFIX} {error}"


def is_placeholder(text: str) -> bool:
    return text.startswith(PLACEHOLDER_PREFIX)


class FileAcquirer:
    """Resolves paths against a fixed project root and returns their text."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.logger = get_logger("acquire")

    def acquire(self, relative_path: str) -> str:
        """Return the file contents, or a placeholder marker carrying the error."""
        target = self.root / relative_path
        try:
            return target.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            self.logger.warning("Could not read %s: %s", relative_path, exc)
            return placeholder_for(exc)

    def acquire_all(self, relative_paths: Iterable[str]) -> Dict[str, str]:
        files: Dict[str, str] = {}
        for relative_path in relative_paths:
            if relative_path in files:
                continue
            files[relative_path] = self.acquire(relative_path)
            self.logger.debug("Acquired %s (%d chars)", relative_path, len(files[relative_path]))
        return files


__all__ = ["FileAcquirer", "PLACEHOLDER_PREFIX", "is_placeholder", "placeholder_for"]
