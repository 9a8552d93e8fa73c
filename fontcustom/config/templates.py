"""
Bundled template definitions.

Maps template shorthand keywords to the files shipped in the package's
templates directory.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

TEMPLATE_SHORTHANDS: Mapping[str, str] = MappingProxyType(
    {
        "preview": "fontcustom-preview.html",
        "css": "fontcustom.css",
        "scss": "_fontcustom.scss",
        "scss-rails": "_fontcustom-rails.scss",
        "bootstrap": "fontcustom-bootstrap.css",
        "bootstrap-scss": "_fontcustom-bootstrap.scss",
        "bootstrap-ie7": "fontcustom-bootstrap-ie7.css",
        "bootstrap-ie7-scss": "_fontcustom-bootstrap-ie7.scss",
    }
)


def get_bundled_template(
    name: str,
    template_dir: Path,
    shorthands: Mapping[str, str] = TEMPLATE_SHORTHANDS,
) -> Path | None:
    """
    Get the bundled template file for a shorthand keyword.

    Returns None when the name is not a shorthand (i.e. a custom template).
    """
    filename = shorthands.get(name)
    if filename is None:
        return None
    return template_dir / filename
