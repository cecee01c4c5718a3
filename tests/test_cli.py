from __future__ import annotations

import json
from pathlib import Path

import pytest
from checktypo.cli.main import DISABLE_FLAGS, build_parser, main
from checktypo.core.exit_codes import ERR_CONFIG, ERR_FINDINGS, ERR_USAGE, NOT_PRUNED, OK

from helpers import with_header


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_reports_violations_in_location_format(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "a.ml").write_bytes(b"a\tb\n")
    code = main(["--quiet", "a.ml"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "a.ml:1.3: [tab] TAB character(s)",
        "a.ml:1.1: [missing-header] missing copyright header",
    ]
    assert code == ERR_FINDINGS


def test_defaults_to_current_directory(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "a.ml").write_bytes(with_header())
    (workdir / "b.ml").write_bytes(with_header("x"))
    code = main(["--quiet", "--jobs", "2"])
    assert capsys.readouterr().out.splitlines() == ["b.ml:10.1: [missing-lf] missing linefeed at EOF"]
    assert code == ERR_FINDINGS


def test_rule_flags_disable_globally(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "a.ml").write_bytes(b"a\tb\n")
    code = main(["--quiet", "-tab", "-missing-header", "a.ml"])
    assert capsys.readouterr().out == ""
    assert code == OK


def test_double_dash_ends_flags(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "-odd.ml").write_bytes(with_header("x \n"))
    code = main(["--quiet", "--", "-odd.ml"])
    assert capsys.readouterr().out.splitlines() == ["-odd.ml:9.3: [white-at-eol] whitespace at end of line"]
    assert code == ERR_FINDINGS


def test_every_suppressible_rule_has_a_flag() -> None:
    parser = build_parser()
    ns = parser.parse_args([f"-{name}" for name in DISABLE_FLAGS])
    assert ns.disabled == list(DISABLE_FLAGS)
    assert "unused-prop" not in DISABLE_FLAGS


@pytest.mark.parametrize("flag", ["-help", "--help"])
def test_help_exits_with_usage_status(flag: str, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([flag])
    assert excinfo.value.code == ERR_USAGE
    assert "usage: checktypo" in capsys.readouterr().out


def test_unknown_flag_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["-bogus"])
    assert excinfo.value.code == ERR_USAGE


def test_makefile_and_reference_files(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "Makefile").write_bytes(with_header("all:\n\techo ok\n"))
    (workdir / "out.reference").write_bytes(b"\t" + b"x" * 100)
    code = main(["--quiet", "Makefile", "out.reference"])
    assert capsys.readouterr().out == ""
    assert code == OK


def test_unreadable_file_is_reported_and_run_continues(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "b.ml").write_bytes(b"x\n")
    code = main(["--quiet", "gone.ml", "b.ml"])
    captured = capsys.readouterr()
    assert "gone.ml: cannot read file" in captured.err
    assert captured.out.splitlines() == ["b.ml:1.1: [missing-header] missing copyright header"]
    assert code == ERR_FINDINGS


def test_manifest_exceptions_and_unused_prop(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "typo.yaml").write_text(
        "schema_version: 1\npaths:\n  a.ml: {exceptions: 'missing-header, long-line'}\n",
        encoding="utf-8",
    )
    (workdir / "a.ml").write_bytes(b"let x = 1\n")
    code = main(["--quiet", "--source", "manifest", "--manifest", "typo.yaml", "a.ml"])
    assert capsys.readouterr().out.splitlines() == ["a.ml:1.1: [unused-prop] unused [long-line] in exception list"]
    assert code == ERR_FINDINGS


def test_check_prune(workdir: Path) -> None:
    (workdir / "vendor").mkdir()
    (workdir / "src").mkdir()
    (workdir / "typo.yaml").write_text("schema_version: 1\npaths:\n  vendor: {exceptions: prune}\n", encoding="utf-8")
    base = ["--quiet", "--source", "manifest", "--manifest", "typo.yaml", "--check-prune"]
    assert main([*base, "vendor"]) == OK
    assert main([*base, "src"]) == NOT_PRUNED


def test_check_prune_requires_directory(workdir: Path) -> None:
    (workdir / "a.ml").write_bytes(b"x\n")
    assert main(["--quiet", "--check-prune", "a.ml"]) == ERR_USAGE


def test_config_error_is_rendered_as_json(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--log-json", "--source", "manifest", "--manifest", "absent.yaml"])
    payload = json.loads(capsys.readouterr().err.strip())
    assert code == ERR_CONFIG
    assert payload["status"] == "error"
    assert payload["errors"][0]["code"] == ERR_CONFIG
    assert payload["errors"][0]["kind"] == "config_error"


def test_verbose_run_reports_pruned_directory(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (workdir / "vendor").mkdir()
    (workdir / "vendor/lib.ml").write_bytes(b"\t\n")
    (workdir / "typo.yaml").write_text("schema_version: 1\npaths:\n  vendor: {exceptions: prune}\n", encoding="utf-8")
    main(["--verbose", "--source", "manifest", "--manifest", "typo.yaml", "."])
    captured = capsys.readouterr()
    assert "vendor/lib.ml" not in captured.out
    pruned = [line for line in captured.err.splitlines() if "action=pruned" in line]
    assert pruned and "reason=metadata" in pruned[0]
