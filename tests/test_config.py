"""Tests for ctxsnap.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from ctxsnap.config import DEFAULT_SOURCES, SnapshotConfig, load_config
from ctxsnap.errors import ConfigError
from ctxsnap.models import SourceSpec


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SnapshotConfig)
    assert config.root == tmp_path.resolve()
    assert config.output == "PROJECT_CONTEXT.md"
    assert config.output_path == tmp_path.resolve() / "PROJECT_CONTEXT.md"
    assert config.manifest == "package.json"
    assert config.scan_target == "src/api/sequenceAnalyzer.js"
    assert config.sources == list(DEFAULT_SOURCES)
    assert config.templates_dir is None


def test_default_sources_cover_six_files_with_known_limits() -> None:
    limits = {source.path: source.max_chars for source in DEFAULT_SOURCES}

    assert limits == {
        "src/server.js": None,
        "src/api/routes.js": 3000,
        "src/api/nexcarClient.js": None,
        "src/api/sequenceAnalyzer.js": 8000,
        "public/app_new.js": 3000,
        "public/index.html": 3000,
    }
    assert load_config(Path("/nonexistent-ctxsnap")).acquired_paths() == list(limits)


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".ctxsnap.yml").write_text(
        """
output: docs/CONTEXT.md
manifest: app/package.json
scan_target: lib/analyzer.js
templates_dir: docs/templates
sources:
  - README.md
  - path: lib/analyzer.js
    title: Analyzer
    language: javascript
    max_chars: "1200"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.output_path == tmp_path.resolve() / "docs" / "CONTEXT.md"
    assert config.manifest == "app/package.json"
    assert config.scan_target == "lib/analyzer.js"
    assert config.templates_dir == tmp_path.resolve() / "docs" / "templates"
    assert config.sources == [
        SourceSpec(path="README.md"),
        SourceSpec(path="lib/analyzer.js", title="Analyzer", language="javascript", max_chars=1200),
    ]


def test_scan_target_is_acquired_even_when_not_embedded(tmp_path: Path) -> None:
    (tmp_path / ".ctxsnap.yml").write_text("sources: [src/server.js]\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.acquired_paths() == ["src/server.js", "src/api/sequenceAnalyzer.js"]


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / ".ctxsnap.yml").write_text("\n# nothing here\n", encoding="utf-8")

    assert load_config(tmp_path).sources == list(DEFAULT_SOURCES)


@pytest.mark.parametrize(
    "content",
    [
        "output: [unterminated\n",
        "- just\n- a list\n",
        "sources: not-a-list\n",
        "sources:\n  - title: no path\n",
        "sources:\n  - path: a.js\n    max_chars: 0\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".ctxsnap.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
