"""Tests for path helpers."""

from pathlib import Path

from fontcustom.core.paths import contains_svgs, expand_path, relative_to_root

ROOT = Path("/proj")


def test_expand_path_relative():
    """Test relative paths are taken from the project root."""
    assert expand_path("svg", ROOT) == Path("/proj/svg")
    assert expand_path("./svg/../fonts", ROOT) == Path("/proj/fonts")
    assert expand_path("", ROOT) == ROOT


def test_expand_path_absolute():
    """Test absolute paths are kept."""
    assert expand_path("/elsewhere/svg", ROOT) == Path("/elsewhere/svg")


def test_expand_path_home(monkeypatch):
    """Test ~ is expanded."""
    monkeypatch.setenv("HOME", "/home/icons")
    assert expand_path("~/svg", ROOT) == Path("/home/icons/svg")


def test_relative_to_root():
    """Test paths render relative to the project root."""
    assert relative_to_root(Path("/proj/svg/a.svg"), ROOT) == "svg/a.svg"
    assert relative_to_root(ROOT, ROOT) == "."
    assert relative_to_root(Path("/other/x"), ROOT) == "/other/x"


def test_contains_svgs(tmp_path):
    """Test only .svg files directly inside the directory count."""
    assert not contains_svgs(tmp_path)

    (tmp_path / "notes.txt").write_text("")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "deep.svg").write_text("")
    (tmp_path / "folder.svg").mkdir()
    assert not contains_svgs(tmp_path)

    (tmp_path / "icon.svg").write_text("")
    assert contains_svgs(tmp_path)
