"""Tests for starter config generation."""

from fontcustom.config.paths import CONFIG_FILENAME
from fontcustom.operations.config import CONFIG_TEMPLATE, generate_config


def test_config_template_is_bundled():
    """Test the starter config ships with the package."""
    assert CONFIG_TEMPLATE.exists()


def test_generate_config_creates_directory(tmp_path):
    """Test the target directory is created."""
    target = generate_config(tmp_path / "a" / "b")
    assert target == tmp_path / "a" / "b" / CONFIG_FILENAME
    assert target.read_text() == CONFIG_TEMPLATE.read_text()


def test_generate_config_keeps_existing(tmp_path):
    """Test an existing config is kept unless forced."""
    existing = tmp_path / CONFIG_FILENAME
    existing.write_text("font_name: mine\n")

    assert generate_config(tmp_path) is None
    assert existing.read_text() == "font_name: mine\n"

    assert generate_config(tmp_path, force=True) == existing
    assert existing.read_text() == CONFIG_TEMPLATE.read_text()
