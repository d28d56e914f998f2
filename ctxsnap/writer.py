"""Atomic output of the composed document."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .errors import OutputError
from .logging import get_logger

# json.loads keeps unpaired "\udXXX" escapes as lone surrogates, which UTF-8 cannot encode.
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def encodable_text(text: str) -> str:
    """Replace lone surrogates with U+FFFD so the text encodes as UTF-8."""
    return _LONE_SURROGATE_RE.sub("\ufffd", text)


class OutputWriter:
    """Replaces the destination file in a single rename."""

    def __init__(self, destination: Path) -> None:
        self.destination = Path(destination)
        self.logger = get_logger("writer")

    def write(self, document_text: str) -> Path:
        # Write to a sibling temp file, then rename; a failed run leaves the old file intact.
        temp_path = self.destination.with_name(f".{self.destination.name}.{os.getpid()}.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8", newline="") as handle:
                handle.write(encodable_text(document_text))
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_path, self.destination)
        except (OSError, UnicodeError) as exc:
            raise OutputError(f"Cannot write {self.destination}: {exc}") from exc
        finally:
            # No-op after a successful replace.
            temp_path.unlink(missing_ok=True)
        self.logger.debug("Wrote %d chars to %s", len(document_text), self.destination)
        return self.destination


__all__ = ["OutputWriter", "encodable_text"]
