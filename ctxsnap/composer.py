"""Composes the project context document from acquired files and metadata."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, List, Mapping, Sequence

from jinja2 import Environment, FileSystemLoader

from .acquire import placeholder_for
from .config import DEFAULT_SOURCES
from .logging import get_logger
from .manifest import dump_manifest, manifest_version
from .models import SourceSpec

TEMPLATE_NAME = "context.md.j2"
TRUNCATION_MARKER = "... [truncated]"

logger = get_logger("composer")


@dataclass(frozen=True)
class Excerpt:
    """A source file prepared for embedding."""

    path: str
    heading: str
    language: str
    body: str
    truncated: bool


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC with millisecond precision and a Z suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def truncate_excerpt(text: str, max_chars: int | None) -> str:
    """Keep at most ``max_chars`` characters, appending the marker when text was cut."""
    if max_chars is None or len(text) <= max_chars:
        return text
    return f"{text[:max_chars]}\n{TRUNCATION_MARKER}"


class ContextComposer:
    """Renders the context template; a pure function of its inputs."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir
        self._env = self._create_env(templates_dir)

    def compose(
        self,
        manifest: Mapping[str, Any],
        files: Mapping[str, str],
        method_names: Sequence[str],
        *,
        generated_at: datetime | None = None,
        sources: Sequence[SourceSpec] = DEFAULT_SOURCES,
    ) -> str:
        moment = generated_at or datetime.now(UTC)
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            generated_at=format_timestamp(moment),
            version=manifest_version(manifest),
            manifest_json=dump_manifest(manifest),
            method_names=list(method_names),
            method_count=len(method_names),
            excerpts=self.build_excerpts(files, sources),
        )

    @staticmethod
    def build_excerpts(files: Mapping[str, str], sources: Sequence[SourceSpec]) -> List[Excerpt]:
        excerpts: List[Excerpt] = []
        for source in sources:
            text = files.get(source.path)
            if text is None:
                text = placeholder_for(FileNotFoundError(f"{source.path} was not acquired"))
            body = truncate_excerpt(text, source.max_chars)
            excerpts.append(
                Excerpt(
                    path=source.path,
                    heading=source.heading,
                    language=source.language,
                    body=body,
                    truncated=body != text,
                )
            )
            if excerpts[-1].truncated:
                logger.debug("Truncated %s to %d chars", excerpts[-1].path, source.max_chars)
        return excerpts

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories: List[str] = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = [
    "ContextComposer",
    "Excerpt",
    "TRUNCATION_MARKER",
    "format_timestamp",
    "truncate_excerpt",
]
