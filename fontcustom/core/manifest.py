"""
Manifest reading.

A previous run leaves a JSON manifest behind; its "options" block is the
lowest-precedence option source after the built-in defaults.
"""

import json
from collections.abc import Mapping
from pathlib import Path

from fontcustom.config.options import OptionValue
from fontcustom.core.errors import ManifestError
from fontcustom.utils.logging import logger


def read_manifest_options(path: Path) -> dict[str, OptionValue]:
    """
    Read the options stored in a manifest.

    Args:
        path: Manifest file; a missing file means a first run.

    Returns:
        The stored options, or {} when there is no manifest.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No manifest at {path}")
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            manifest = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(f"The manifest at `{path}` failed to load. Message: {e}") from e

    if not isinstance(manifest, Mapping):
        raise ManifestError(f"The manifest at `{path}` should be a JSON object.")

    options = manifest.get("options", {})
    if not isinstance(options, Mapping):
        raise ManifestError(f"The manifest at `{path}` has an invalid options block.")
    return dict(options)
