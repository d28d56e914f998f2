"""Core data models shared across ctxsnap components."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class SourceSpec:
    """A project file embedded in the snapshot."""

    path: str
    title: Optional[str] = None
    language: str = ""
    max_chars: Optional[int] = None

    @property
    def heading(self) -> str:
        return self.title or self.path


@dataclass
class RunResult:
    """Outcome of a successful snapshot run."""

    path: Path
    generated_at: datetime
    version: str
    method_names: List[str] = field(default_factory=list)
    missing_files: List[str] = field(default_factory=list)
