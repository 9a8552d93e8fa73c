"""
Config file generation.

Writes a starter fontcustom.yml so options persist between compiles.
"""

import shutil
from pathlib import Path

from fontcustom.config.paths import CONFIG_FILENAME, TEMPLATES_DIR
from fontcustom.utils.logging import logger

CONFIG_TEMPLATE = TEMPLATES_DIR / CONFIG_FILENAME


def generate_config(directory: Path, force: bool = False) -> Path | None:
    """
    Copy the starter fontcustom.yml into a directory.

    Args:
        directory: Target directory, created if missing
        force: Overwrite an existing fontcustom.yml

    Returns:
        The written file, or None if one already existed
    """
    directory = Path(directory)
    target = directory / CONFIG_FILENAME

    if target.exists() and not force:
        logger.warning(f"{target} already exists. Use --force to overwrite.")
        return None

    directory.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(CONFIG_TEMPLATE, target)
    logger.info(f"Created {target}")
    return target
