"""
Filesystem path constants for option resolution.

Centralizes file names and search locations to avoid magic strings.
"""

from pathlib import Path

PACKAGE_DIR = Path(__file__).parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"

CONFIG_FILENAME = "fontcustom.yml"
MANIFEST_FILENAME = ".fontcustom-manifest.json"

# Checked in order, relative to the project root
CONFIG_SEARCH_PATHS = (
    Path(CONFIG_FILENAME),
    Path("config") / CONFIG_FILENAME,
)
