from __future__ import annotations

from pathlib import Path

import pytest

from massfonts.fonts.downloader import DownloadReport
from massfonts.fonts.logging import FontPipelineLogger
from massfonts.fonts.models import FamilyResult
from massfonts.ui.cli.presenter import present_download_summary, present_variants
from massfonts.ui.cli.state import CLIState, emit_warning


def test_warnings_are_recorded_on_the_logger_state(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState()
    logger = FontPipelineLogger(quiet=True, _state=state)

    logger.warning("Skipping %s: %s", "Lato", "no sources")

    assert state.warnings == ["Skipping Lato: no sources"]
    assert "warning: Skipping Lato" in capsys.readouterr().err


def test_quiet_logger_suppresses_info(capsys: pytest.CaptureFixture[str]) -> None:
    logger = FontPipelineLogger(quiet=True, _state=CLIState())
    logger.info("hello")
    assert capsys.readouterr().out == ""


def test_debug_requires_verbosity(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState()
    logger = FontPipelineLogger(_state=state)

    logger.debug("hidden")
    assert "hidden" not in capsys.readouterr().out

    state.verbosity = 1
    logger.debug("shown %d", 1)
    assert "[debug] shown 1" in capsys.readouterr().out


def test_message_formatting_tolerates_bad_arguments() -> None:
    state = CLIState()
    FontPipelineLogger(quiet=True, _state=state).warning("no placeholders", "extra")
    assert state.warnings == ["no placeholders extra"]


def test_progress_counts_without_a_terminal() -> None:
    logger = FontPipelineLogger(_state=CLIState())
    with logger.progress("Roboto", total=2) as advance:
        advance()
        advance()


def test_emit_warning_with_verbose_details(capsys: pytest.CaptureFixture[str]) -> None:
    state = CLIState(verbosity=1)
    emit_warning("Could not resolve", exception=ValueError("bad axis"), state=state)
    err = capsys.readouterr().err
    assert "bad axis" in err
    assert "type: ValueError" in err


def test_present_download_summary_plain_text(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    folder = tmp_path / "roboto"
    folder.mkdir()
    (folder / "roboto-400.woff2").write_bytes(b"x" * 2048)
    report = DownloadReport(
        families=[FamilyResult(name="Roboto", folder="roboto", files=["roboto-400.woff2"])],
        skipped=["Lato"],
        downloaded=[folder / "roboto-400.woff2"],
    )

    present_download_summary(CLIState(), report, tmp_path)

    out = capsys.readouterr().out
    assert "* Roboto:" in out
    assert "roboto-400.woff2" in out
    assert "2.0 KiB" in out
    assert "1 file(s) downloaded, 0 already present." in out
    assert "Skipped: Lato" in out


def test_present_variants_plain_text(capsys: pytest.CaptureFixture[str]) -> None:
    present_variants(CLIState(), [("Roboto", "400, 700", "family=Roboto:wght@400;700")])
    out = capsys.readouterr().out
    assert "Roboto: 400, 700" in out
    assert "family=Roboto:wght@400;700" in out
