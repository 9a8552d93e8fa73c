"""
Option keys and the built-in default and placeholder tables.

Every option source (command line, manifest, config file) is keyed by
the same closed set of names defined here.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Union

OptionValue = Union[
    str, bool, int, float, None, Mapping[str, "OptionValue"], Sequence[str]
]


class OptionKey(str, Enum):
    """Recognized option names."""

    CONFIG = "config"
    PROJECT_ROOT = "project_root"
    FONT_NAME = "font_name"
    MANIFEST = "manifest"
    INPUT = "input"
    OUTPUT = "output"
    TEMPLATES = "templates"
    # Tool flags, passed through to the generators
    CSS_SELECTOR = "css_selector"
    PREPROCESSOR_PATH = "preprocessor_path"
    AUTOWIDTH = "autowidth"
    NO_HASH = "no_hash"
    DEBUG = "debug"
    FORCE = "force"
    QUIET = "quiet"
    COPYRIGHT = "copyright"

    def __str__(self) -> str:
        return self.value


# Keys with a dedicated ResolvedOptions field; the rest are flags
RESOLVED_FIELDS = frozenset(
    {
        OptionKey.CONFIG,
        OptionKey.PROJECT_ROOT,
        OptionKey.FONT_NAME,
        OptionKey.MANIFEST,
        OptionKey.INPUT,
        OptionKey.OUTPUT,
        OptionKey.TEMPLATES,
    }
)

DEFAULT_OPTIONS: Mapping[OptionKey, OptionValue] = MappingProxyType(
    {
        OptionKey.CONFIG: None,
        OptionKey.MANIFEST: None,
        OptionKey.INPUT: None,
        OptionKey.OUTPUT: None,
        OptionKey.TEMPLATES: ("css", "preview"),
        OptionKey.FONT_NAME: "fontcustom",
        OptionKey.CSS_SELECTOR: ".icon-{{glyph}}",
        OptionKey.PREPROCESSOR_PATH: None,
        OptionKey.AUTOWIDTH: False,
        OptionKey.NO_HASH: False,
        OptionKey.DEBUG: False,
        OptionKey.FORCE: False,
        OptionKey.QUIET: False,
        OptionKey.COPYRIGHT: "",
    }
)

# Shown as fake defaults in --help; a CLI value equal to one of these was
# never typed by the user.
EXAMPLE_OPTIONS: Mapping[OptionKey, str] = MappingProxyType(
    {
        OptionKey.PROJECT_ROOT: "(working directory)",
        OptionKey.INPUT: "./",
        OptionKey.OUTPUT: "./FONT_NAME",
        OptionKey.CONFIG: "./fontcustom.yml -or- ./config/fontcustom.yml",
        OptionKey.MANIFEST: "./.fontcustom-manifest.json",
    }
)


def normalize_key(key: object) -> OptionKey | str:
    """
    Map a raw option name onto the shared key space.

    ":font_name", "font-name" and "FONT_NAME" all become OptionKey.FONT_NAME.
    Unrecognized names come back as normalized plain strings.
    """
    name = str(key).strip().lstrip(":").replace("-", "_").lower()
    try:
        return OptionKey(name)
    except ValueError:
        return name


def normalize_options(
    options: Mapping[object, OptionValue] | None,
) -> dict[OptionKey | str, OptionValue]:
    """Normalize every key of a raw option map; later duplicates win."""
    if not options:
        return {}
    return {normalize_key(key): value for key, value in options.items()}
