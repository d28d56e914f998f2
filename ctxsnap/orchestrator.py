"""Pipeline orchestration for a single snapshot run."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Callable, Optional

from .acquire import FileAcquirer, is_placeholder
from .composer import ContextComposer
from .config import SnapshotConfig, load_config
from .logging import get_logger
from .manifest import load_manifest, manifest_version
from .models import RunResult
from .scanner import MethodNameScanner
from .writer import OutputWriter


class Orchestrator:
    """Runs acquire, extract, compose and write as one linear pass.

    Concurrent runs against the same project are last-writer-wins; no run
    lock is taken.
    """

    def __init__(
        self,
        scanner: MethodNameScanner | None = None,
        composer: ContextComposer | None = None,
        acquirer_factory: Callable[[Path], FileAcquirer] | None = None,
        writer_factory: Callable[[Path], OutputWriter] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.scanner = scanner or MethodNameScanner()
        self._composer = composer
        self._acquirer_factory = acquirer_factory or FileAcquirer
        self._writer_factory = writer_factory or OutputWriter
        self._clock = clock or (lambda: datetime.now(UTC))
        self.logger = get_logger("orchestrator")

    def run(self, path: str = ".", *, now: Optional[datetime] = None) -> RunResult:
        """Generate the context document for the project at ``path``."""
        root = Path(path).expanduser().resolve()
        self.logger.info("Generating context snapshot for %s", root)

        config = load_config(root)
        manifest = load_manifest(config.root, config.manifest)
        self.logger.debug("Loaded manifest %s", config.manifest)

        acquirer = self._acquirer_factory(config.root)
        files = acquirer.acquire_all(config.acquired_paths())
        missing = [name for name, text in files.items() if is_placeholder(text)]
        if missing:
            self.logger.warning("%d file(s) could not be read: %s", len(missing), ", ".join(missing))

        method_names = self.scanner.scan(files[config.scan_target])
        self.logger.debug("Extracted %d method names from %s", len(method_names), config.scan_target)

        generated_at = now or self._clock()
        composer = self._resolve_composer(config)
        document = composer.compose(
            manifest,
            files,
            method_names,
            generated_at=generated_at,
            sources=config.sources,
        )

        written = self._writer_factory(config.output_path).write(document)
        self.logger.info("Context written to %s", written)

        return RunResult(
            path=written,
            generated_at=generated_at,
            version=manifest_version(manifest),
            method_names=method_names,
            missing_files=missing,
        )

    def _resolve_composer(self, config: SnapshotConfig) -> ContextComposer:
        if self._composer is not None:
            return self._composer
        return ContextComposer(templates_dir=config.templates_dir)


__all__ = ["Orchestrator"]
