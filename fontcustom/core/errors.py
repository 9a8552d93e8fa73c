"""
Errors raised while resolving options.

All of them are user-configuration problems: the message is meant to be
shown as-is and the invocation corrected.
"""


class FontcustomError(Exception):
    """Base error for fontcustom."""


class ConfigNotFound(FontcustomError):
    """An explicit config path was given but no fontcustom.yml is there."""


class ConfigParseError(FontcustomError):
    """The config file exists but could not be parsed."""


class InputError(FontcustomError):
    """Invalid input paths, or no SVGs to build from."""


class OutputError(FontcustomError):
    """Invalid output paths."""


class TemplateError(FontcustomError):
    """A custom template could not be found."""


class ManifestError(FontcustomError):
    """The manifest from a previous run could not be read."""
