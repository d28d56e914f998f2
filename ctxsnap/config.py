"""Configuration loading for ctxsnap (.ctxsnap.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .models import SourceSpec

CONFIG_FILENAME = ".ctxsnap.yml"

DEFAULT_OUTPUT = "PROJECT_CONTEXT.md"
DEFAULT_MANIFEST = "package.json"
DEFAULT_SCAN_TARGET = "src/api/sequenceAnalyzer.js"

DEFAULT_SOURCES: tuple[SourceSpec, ...] = (
    SourceSpec(path="src/server.js", language="javascript"),
    SourceSpec(
        path="src/api/routes.js",
        title="src/api/routes.js (excerpt - main endpoints)",
        language="javascript",
        max_chars=3000,
    ),
    SourceSpec(path="src/api/nexcarClient.js", language="javascript"),
    SourceSpec(
        path="src/api/sequenceAnalyzer.js",
        title="src/api/sequenceAnalyzer.js (excerpt - main methods)",
        language="javascript",
        max_chars=8000,
    ),
    SourceSpec(
        path="public/app_new.js",
        title="public/app_new.js (excerpt - frontend)",
        language="javascript",
        max_chars=3000,
    ),
    SourceSpec(
        path="public/index.html",
        title="public/index.html (excerpt - web interface)",
        language="html",
        max_chars=3000,
    ),
)


@dataclass
class SnapshotConfig:
    """Represents the settings defined in .ctxsnap.yml."""

    root: Path
    output: str = DEFAULT_OUTPUT
    manifest: str = DEFAULT_MANIFEST
    scan_target: str = DEFAULT_SCAN_TARGET
    sources: List[SourceSpec] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    templates_dir: Optional[Path] = None

    @property
    def output_path(self) -> Path:
        return self.root / self.output

    def acquired_paths(self) -> List[str]:
        """Return every path the run reads, in embedding order, scan target last."""
        paths = [source.path for source in self.sources]
        if self.scan_target not in paths:
            paths.append(self.scan_target)
        return paths


def load_config(root: Path) -> SnapshotConfig:
    """Load configuration for the project rooted at ``root``."""
    root = root.expanduser().resolve()
    config_file = root / CONFIG_FILENAME

    if not config_file.exists():
        return SnapshotConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = SnapshotConfig(root=root)
    config.output = _as_str(data.get("output")) or DEFAULT_OUTPUT
    config.manifest = _as_str(data.get("manifest")) or DEFAULT_MANIFEST
    config.scan_target = _as_str(data.get("scan_target")) or DEFAULT_SCAN_TARGET

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir

    if "sources" in data:
        config.sources = _parse_sources(data.get("sources"))

    return config


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_sources(value: Any) -> List[SourceSpec]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise ConfigError("'sources' must be a list of entries")

    sources: List[SourceSpec] = []
    for entry in value:
        if isinstance(entry, str):
            sources.append(SourceSpec(path=entry))
            continue
        item = _as_dict(entry)
        path = _as_str(item.get("path"))
        if not path:
            raise ConfigError("Every entry in 'sources' needs a 'path'")
        max_chars = _as_int(item.get("max_chars"))
        if max_chars is not None and max_chars <= 0:
            raise ConfigError(f"'max_chars' for {path} must be positive")
        sources.append(
            SourceSpec(
                path=path,
                title=_as_str(item.get("title")),
                language=_as_str(item.get("language")) or "",
                max_chars=max_chars,
            )
        )
    return sources


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_SOURCES",
    "SnapshotConfig",
    "load_config",
]
