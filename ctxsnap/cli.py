"""CLI entrypoint for ctxsnap."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .errors import CtxSnapError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctxsnap",
        description="Generate a timestamped markdown context snapshot of the project.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint; exits non-zero when the snapshot cannot be produced."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        result = Orchestrator().run(args.path)
    except CtxSnapError as exc:
        logger.error("%s", exc)
        parser.exit(1, f"ctxsnap failed: {exc}\n")
    except Exception as exc:  # pragma: no cover - unexpected failure
        logger.exception("Unexpected failure")
        parser.exit(1, f"ctxsnap failed: {exc}\nRun with --verbose for more details.\n")

    print(f"Context generated at {_relativize(result.path)}")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
