from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from compatlint.exceptions import DocumentLoadError, NotATreeError
from compatlint.loader import discover_files, is_browser_data, load_document
from compatlint.model import FeatureReport, Offender, Violation
from compatlint.render import format_value, render_reports, render_summary
from compatlint.util import log as log_utils


def _render(renderable: object) -> str:
    console = Console(width=200, record=True, soft_wrap=True)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


def test_exception_messages() -> None:
    assert "got str" in str(NotATreeError("str"))
    assert "Unable to load x.json" in str(DocumentLoadError("x.json"))
    assert "(Boom)" in str(DocumentLoadError("x.json", cause="Boom"))


def test_discover_files_expands_dirs_and_dedupes(tmp_path: Path) -> None:
    (tmp_path / "b").mkdir()
    (tmp_path / "b" / "z.json").write_text("{}", encoding="utf-8")
    (tmp_path / "b" / "a.json").write_text("{}", encoding="utf-8")
    (tmp_path / "b" / "notes.txt").write_text("", encoding="utf-8")
    single = tmp_path / "b" / "a.json"

    files = discover_files([tmp_path / "b", single, tmp_path / "missing"])

    assert [path.name for path in files] == ["a.json", "z.json"]


def test_is_browser_data() -> None:
    assert is_browser_data(Path("browsers/chrome.json"))
    assert not is_browser_data(Path("api/browsers.json"))


def test_load_document_preserves_order(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"zeta": 1, "alpha": 2}', encoding="utf-8")
    assert list(load_document(path)) == ["zeta", "alpha"]


def test_load_document_errors(tmp_path: Path) -> None:
    with pytest.raises(DocumentLoadError, match="FileNotFoundError"):
        load_document(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(DocumentLoadError, match="line 1"):
        load_document(broken)


def test_format_value() -> None:
    assert format_value("10") == "10"
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(None) == "null"
    assert format_value(("1", "2")) == "[Array]"


def test_render_reports() -> None:
    reports = [
        FeatureReport(
            feature="Widget",
            path=("api", "Widget"),
            errors=(
                Violation("unsupported", "firefox", False, (Offender("spin", "30"),)),
                Violation(
                    "subfeature_earlier_implementation",
                    "safari",
                    "11",
                    (Offender("turn", "9"), Offender("flip", ("8", True))),
                ),
            ),
        )
    ]

    output = _render(render_reports("api/Widget.json", reports))

    assert "✖ api/Widget.json" in output
    assert "Consistency - 1 error:" in output
    assert "2 × Widget [api.Widget]:" in output
    assert "No support in firefox" in output
    assert "later version (11)" in output
    assert "api.Widget.turn: 9" in output
    assert "api.Widget.flip: [Array]" in output


def test_render_summary() -> None:
    output = _render(render_summary(["a.json", "b.json"]))
    assert "Problems in 2 files:" in output
    assert "✖ b.json" in output


def test_debug_logging(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.delenv("PYCOMPATLINT_DEBUG", raising=False)
    assert log_utils.debug_enabled() is False

    monkeypatch.setenv("PYCOMPATLINT_DEBUG", "1")
    assert log_utils.debug_enabled() is True
    with caplog.at_level("DEBUG", logger=log_utils.LOGGER.name):
        log_utils.debug_log("checking api.Widget")
    assert "checking api.Widget" in caplog.text


def test_render_reports_header_counts_features() -> None:
    violation = Violation("unsupported", "chrome", False, (Offender("a", "1"),))
    reports = [
        FeatureReport(feature="One", path=("api", "One"), errors=(violation, violation)),
        FeatureReport(feature="Two", path=("api", "Two"), errors=(violation,)),
    ]

    output = _render(render_reports("api.json", reports))

    assert "Consistency - 2 errors:" in output
    assert "2 × One [api.One]:" in output
    assert "1 × Two [api.Two]:" in output
