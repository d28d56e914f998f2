"""Project manifest loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from .errors import ManifestError

UNKNOWN_VERSION = "unknown"


def load_manifest(root: Path, relative_path: str) -> Dict[str, Any]:
    """Read and parse the manifest; any failure is fatal for the run."""
    path = Path(root) / relative_path
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read manifest {relative_path}: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Cannot parse manifest {relative_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {relative_path} must contain a JSON object")
    return data


def manifest_version(manifest: Mapping[str, Any]) -> str:
    version = manifest.get("version")
    if version is None:
        return UNKNOWN_VERSION
    return str(version)


def dump_manifest(manifest: Mapping[str, Any]) -> str:
    """Re-serialise the manifest as two-space indented JSON, preserving key order."""
    return json.dumps(manifest, indent=2, ensure_ascii=False)


__all__ = ["UNKNOWN_VERSION", "dump_manifest", "load_manifest", "manifest_version"]
