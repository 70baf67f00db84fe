from __future__ import annotations

from typer.testing import CliRunner

from gridpaper import config
from gridpaper.main import app


runner = CliRunner()


def test_outputs_lists_reference_set() -> None:
    result = runner.invoke(app, ["outputs"])
    assert result.exit_code == 0
    assert result.output.split() == [
        "grid_paper_red.svg",
        "grid_paper_green.svg",
        "grid_paper_blue.svg",
        "calendar_blue.svg",
    ]


def test_build_default_set(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "OUT_DIR", config.OUT_DIR)
    result = runner.invoke(app, ["build", "--out", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "calendar_blue.svg",
        "grid_paper_blue.svg",
        "grid_paper_green.svg",
        "grid_paper_red.svg",
    ]


def test_build_selected_kind_and_labels(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "OUT_DIR", config.OUT_DIR)
    result = runner.invoke(
        app,
        ["build", "--out", str(tmp_path), "-k", "calendar", "-c", "green", "--row-label", "Walk", "--pdf"],
    )
    assert result.exit_code == 0, result.output
    svg_text = (tmp_path / "calendar_green.svg").read_text(encoding="utf-8")
    assert "Walk" in svg_text
    assert "Brush Teeth" not in svg_text
    assert (tmp_path / "calendar_green.pdf").exists()


def test_bad_paper_is_usage_error(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "OUT_DIR", config.OUT_DIR)
    result = runner.invoke(app, ["build", "--out", str(tmp_path), "--paper", "tabloid"])
    assert result.exit_code == 2


def test_write_failure_exits_with_code_1(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "OUT_DIR", config.OUT_DIR)
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    result = runner.invoke(app, ["build", "--out", str(blocker)])
    assert result.exit_code == 1
    assert "FAILED" in result.output


def test_colliding_colors_are_usage_error(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config, "OUT_DIR", config.OUT_DIR)
    result = runner.invoke(app, ["build", "--out", str(tmp_path), "-c", "Red", "-c", "red"])
    assert result.exit_code == 2
    assert list(tmp_path.iterdir()) == []
