"""CLI behaviour tests."""

from __future__ import annotations

import pytest

from ctxsnap.cli import _build_parser, main


def test_cli_defaults_to_current_directory() -> None:
    args = _build_parser().parse_args([])
    assert args.path == "."
    assert args.verbose is False
    assert args.log_file is None


def test_cli_accepts_verbose_and_path() -> None:
    args = _build_parser().parse_args(["--verbose", "some/project"])
    assert args.verbose is True
    assert args.path == "some/project"


def test_main_reports_success(project_builder, capsys) -> None:
    project_builder.write_manifest({"version": "1.0.0"})

    main([str(project_builder.path())])

    out = capsys.readouterr().out
    assert "Context generated at" in out
    assert (project_builder.path() / "PROJECT_CONTEXT.md").exists()


def test_main_exits_non_zero_on_bad_manifest(project_builder, capsys) -> None:
    project_builder.write({"package.json": "{oops"})

    with pytest.raises(SystemExit) as excinfo:
        main([str(project_builder.path())])

    assert excinfo.value.code == 1
    assert "ctxsnap failed: Cannot parse manifest" in capsys.readouterr().err
    assert not (project_builder.path() / "PROJECT_CONTEXT.md").exists()


def test_main_writes_log_file(project_builder, tmp_path) -> None:
    project_builder.write_manifest({"version": "1.0.0"})
    log_file = tmp_path / "ctxsnap.log"

    main(["--log-file", str(log_file), str(project_builder.path())])

    assert "Context written to" in log_file.read_text(encoding="utf-8")
