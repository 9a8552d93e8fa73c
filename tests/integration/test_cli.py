"""CLI tests for the options and config commands."""

import json

import pytest
from click.testing import CliRunner

from fontcustom import __version__
from fontcustom.cli.main import cli
from fontcustom.config.paths import TEMPLATES_DIR


@pytest.fixture
def runner():
    """Create a CliRunner instance for testing CLI commands."""
    return CliRunner()


def run_options(runner, project, *args):
    return runner.invoke(cli, ["options", "--project-root", str(project), *args])


def test_version(runner):
    """Test --version prints the package version."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_shows_placeholders(runner):
    """Test placeholder defaults appear in the help text."""
    result = runner.invoke(cli, ["options", "--help"])
    assert result.exit_code == 0
    assert "./FONT_NAME" in result.output


def test_options_prints_resolved_json(runner, project):
    """Test the resolved options are printed as JSON."""
    result = run_options(runner, project, "icons", "--font-name", "my icons")
    assert result.exit_code == 0, result.output

    data = json.loads(result.stdout)
    assert data["font_name"] == "my-icons"
    assert data["input"]["vectors"] == str(project / "icons")
    assert data["output"]["fonts"] == str(project / "my-icons")
    assert data["templates"] == [
        str(TEMPLATES_DIR / "fontcustom.css"),
        str(TEMPLATES_DIR / "fontcustom-preview.html"),
    ]
    assert data["no_hash"] is False


def test_options_templates_and_flags(runner, project):
    """Test repeated and space-separated templates plus flags."""
    result = run_options(
        runner, project, "icons", "-t", "scss preview", "-t", "bootstrap", "--no-hash"
    )
    assert result.exit_code == 0, result.output

    data = json.loads(result.stdout)
    assert [path.rsplit("/", 1)[-1] for path in data["templates"]] == [
        "_fontcustom.scss",
        "fontcustom-preview.html",
        "fontcustom-bootstrap.css",
    ]
    assert data["no_hash"] is True


def test_options_reads_config_and_manifest(runner, project):
    """Test config beats manifest, and the CLI beats both."""
    (project / ".fontcustom-manifest.json").write_text(
        json.dumps({"options": {"font_name": "from-manifest", "css_selector": ".m-{{glyph}}"}})
    )
    (project / "fontcustom.yml").write_text("input: icons\nfont_name: from-config\n")

    result = run_options(runner, project)
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["font_name"] == "from-config"
    assert data["css_selector"] == ".m-{{glyph}}"
    assert data["config"] == str(project / "fontcustom.yml")

    result = run_options(runner, project, "--font-name", "from-cli")
    assert json.loads(result.stdout)["font_name"] == "from-cli"


def test_options_error_exits_nonzero(runner, project):
    """Test resolution errors exit with status 1."""
    (project / "empty").mkdir()
    result = run_options(runner, project, "empty")
    assert result.exit_code == 1


def test_options_missing_config_exits_nonzero(runner, project):
    """Test an explicit missing config fails."""
    result = run_options(runner, project, "icons", "--config", "nope.yml")
    assert result.exit_code == 1


def test_config_generates_file(runner, tmp_path):
    """Test the starter config is written once."""
    target = tmp_path / "site"
    result = runner.invoke(cli, ["config", str(target)])
    assert result.exit_code == 0
    config = target / "fontcustom.yml"
    assert config.exists()
    assert "Font Custom Configuration" in config.read_text()

    config.write_text("font_name: mine\n")
    result = runner.invoke(cli, ["config", str(target)])
    assert result.exit_code == 1
    assert config.read_text() == "font_name: mine\n"

    result = runner.invoke(cli, ["config", str(target), "--force"])
    assert result.exit_code == 0
    assert "Font Custom Configuration" in config.read_text()


def test_generated_config_resolves(runner, project):
    """Test the starter config is an empty option set."""
    runner.invoke(cli, ["config", str(project)])
    result = run_options(runner, project, "icons")
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["font_name"] == "fontcustom"
    assert data["manifest"] == str(project / ".fontcustom-manifest.json")


def test_options_reads_manifest_beside_config(runner, project):
    """Test the manifest next to config/fontcustom.yml feeds the options."""
    (project / "config").mkdir()
    (project / "config" / "fontcustom.yml").write_text("input: icons\n")
    (project / "config" / ".fontcustom-manifest.json").write_text(
        json.dumps({"options": {"font_name": "from-manifest"}})
    )

    result = run_options(runner, project)
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    assert data["font_name"] == "from-manifest"
    assert data["manifest"] == str(project / "config" / ".fontcustom-manifest.json")
