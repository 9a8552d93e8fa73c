"""
Option resolution.

Merges command-line options, the options stored in a previous run's
manifest, and an optional fontcustom.yml into one validated, read-only
ResolvedOptions.

Precedence, lowest to highest: built-in defaults, manifest, config file,
command line.
"""

import os
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from fontcustom.config.options import (
    DEFAULT_OPTIONS,
    EXAMPLE_OPTIONS,
    RESOLVED_FIELDS,
    OptionKey,
    OptionValue,
    normalize_key,
    normalize_options,
)
from fontcustom.config.paths import (
    CONFIG_FILENAME,
    CONFIG_SEARCH_PATHS,
    MANIFEST_FILENAME,
    TEMPLATES_DIR,
)
from fontcustom.config.templates import TEMPLATE_SHORTHANDS, get_bundled_template
from fontcustom.core.errors import (
    ConfigNotFound,
    ConfigParseError,
    FontcustomError,
    InputError,
    OutputError,
    TemplateError,
)
from fontcustom.core.paths import contains_svgs, expand_path, relative_to_root
from fontcustom.utils.logging import logger, say_message

StatusCallback = Callable[[str, str], None]
RawOptions = Mapping[Any, OptionValue]
Options = dict[OptionKey | str, OptionValue]

_NON_WORD = re.compile(r"\W+")


@dataclass(frozen=True)
class SinglePath:
    """One path shared by every slot (e.g. `input: icons/`)."""

    path: str


@dataclass(frozen=True)
class NamedPaths:
    """A path per slot (e.g. `output: {fonts: ..., css: ...}`)."""

    paths: Mapping[str, OptionValue]


@dataclass(frozen=True)
class InputPaths:
    """Resolved input directories."""

    vectors: Path
    templates: Path


@dataclass(frozen=True)
class OutputPaths:
    """Resolved output directories. They may not exist yet."""

    fonts: Path
    css: Path
    preview: Path
    custom: Mapping[str, Path] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True)
class ResolvedOptions:
    """
    Effective options for one fontcustom run.

    All paths are absolute. Input directories and templates exist; the
    vectors directory holds at least one SVG. Options without a dedicated
    field (css_selector, no_hash, ...) are kept in `flags`.
    """

    project_root: Path
    config: Path | None
    manifest: Path
    font_name: str
    input: InputPaths
    output: OutputPaths
    templates: tuple[Path, ...]
    flags: Mapping[str, OptionValue] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get(self, key: OptionKey | str, default: OptionValue = None) -> OptionValue:
        """Read a pass-through flag by name."""
        return self.flags.get(str(normalize_key(key)), default)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict representation."""
        return {
            "project_root": str(self.project_root),
            "config": str(self.config) if self.config else None,
            "manifest": str(self.manifest),
            "font_name": self.font_name,
            "input": {
                "vectors": str(self.input.vectors),
                "templates": str(self.input.templates),
            },
            "output": {
                "fonts": str(self.output.fonts),
                "css": str(self.output.css),
                "preview": str(self.output.preview),
                **{key: str(path) for key, path in self.output.custom.items()},
            },
            "templates": [str(template) for template in self.templates],
            **{key: _thaw(value) for key, value in self.flags.items()},
        }


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _freeze(value: OptionValue) -> OptionValue:
    """Make nested lists and dicts read-only."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(val) for key, val in value.items()})
    if _is_sequence(value):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: OptionValue) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _thaw(val) for key, val in value.items()}
    if _is_sequence(value):
        return [_thaw(item) for item in value]
    return value


def _same_value(left: OptionValue, right: OptionValue) -> bool:
    """Compare option values; lists equal tuples, booleans never equal numbers."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if _is_sequence(left) and _is_sequence(right):
        return list(left) == list(right)
    return left == right


def _slot_name(key: object) -> str:
    return str(key).strip().lstrip(":").replace("-", "_").lower()


def _is_path_like(value: object) -> bool:
    return isinstance(value, (str, os.PathLike))


def coerce_paths(
    value: OptionValue, error: type[FontcustomError], label: str
) -> SinglePath | NamedPaths | None:
    """
    Classify an input/output value as a single path or a mapping of paths.

    Returns None when the option was not given. Any other shape raises
    `error`.
    """
    if value is None:
        return None
    if _is_path_like(value):
        return SinglePath(os.fspath(value))
    if isinstance(value, Mapping):
        return NamedPaths(
            MappingProxyType({_slot_name(key): val for key, val in value.items()})
        )
    raise error(
        f"{label} should be a directory or a mapping of directories, "
        f"not {type(value).__name__}."
    )


def clean_font_name(name: OptionValue) -> str:
    """Strip whitespace and replace each run of non-word characters with "-"."""
    return _NON_WORD.sub("-", str(name).strip())


class OptionsResolver:
    """
    Resolves raw option maps into ResolvedOptions.

    The default and placeholder tables, the bundled template location and
    the status callback are injected so alternate tables can be used
    without touching module state.
    """

    def __init__(
        self,
        defaults: RawOptions = DEFAULT_OPTIONS,
        examples: RawOptions = EXAMPLE_OPTIONS,
        template_dir: Path = TEMPLATES_DIR,
        template_shorthands: Mapping[str, str] = TEMPLATE_SHORTHANDS,
        say: StatusCallback = say_message,
        working_dir: Path | None = None,
    ):
        self.defaults = MappingProxyType(normalize_options(defaults))
        self.examples = MappingProxyType(normalize_options(examples))
        self.template_dir = Path(template_dir)
        self.template_shorthands = template_shorthands
        self.say = say
        self.working_dir = Path(working_dir) if working_dir is not None else None

    def resolve(
        self,
        cli_options: RawOptions | None = None,
        manifest_options: RawOptions | None = None,
    ) -> ResolvedOptions:
        """
        Run every resolution stage in order.

        Raises:
            FontcustomError: on the first invalid option; nothing partial is
                returned.
        """
        working_dir = self.working_dir or Path.cwd()

        cli = self.overwrite_examples(normalize_options(cli_options), working_dir)
        project_root = expand_path(cli[OptionKey.PROJECT_ROOT], working_dir)
        logger.debug(f"Project root: {project_root}")

        config_path = self.find_config(cli.get(OptionKey.CONFIG), project_root)
        config = self.load_config(config_path, project_root)

        options = self.merge_options(cli, normalize_options(manifest_options), config)
        root_option = options.get(OptionKey.PROJECT_ROOT)
        if root_option:
            project_root = expand_path(root_option, working_dir)

        font_name = options.get(OptionKey.FONT_NAME)
        if font_name is None:
            font_name = self.defaults.get(OptionKey.FONT_NAME, "")
        font_name = clean_font_name(font_name)

        manifest = self.manifest_path(
            options.get(OptionKey.MANIFEST), config_path, project_root
        )
        input_paths = self.input_paths(options.get(OptionKey.INPUT), project_root)
        output_paths = self.output_paths(
            options.get(OptionKey.OUTPUT), project_root, font_name
        )
        templates = self.template_paths(
            options.get(OptionKey.TEMPLATES), input_paths.templates, project_root
        )

        flags = {
            str(key): _freeze(value)
            for key, value in options.items()
            if key not in RESOLVED_FIELDS
        }

        return ResolvedOptions(
            project_root=project_root,
            config=config_path,
            manifest=manifest,
            font_name=font_name,
            input=input_paths,
            output=output_paths,
            templates=templates,
            flags=MappingProxyType(flags),
        )

    def locate_manifest(self, cli_options: RawOptions | None = None) -> Path:
        """
        Find the previous run's manifest before a full resolution.

        Uses the same rules as the resolved manifest path: an explicit
        option, next to the config file, or in the project root.

        Raises:
            ConfigNotFound: if an explicit config path holds no config file.
        """
        working_dir = self.working_dir or Path.cwd()
        cli = self.overwrite_examples(normalize_options(cli_options), working_dir)
        project_root = expand_path(cli[OptionKey.PROJECT_ROOT], working_dir)
        config_path = self.find_config(cli.get(OptionKey.CONFIG), project_root)
        return self.manifest_path(
            cli.get(OptionKey.MANIFEST), config_path, project_root
        )

    def overwrite_examples(self, cli: Options, working_dir: Path) -> Options:
        """
        Drop placeholder values, then fill in defaults.

        The CLI shows placeholders as fake defaults in its help text, so a
        value equal to its placeholder was never typed by the user. Options
        the CLI reports as None were not given either.
        """
        cli = {
            key: value
            for key, value in cli.items()
            if value is not None
            and not (key in self.examples and _same_value(value, self.examples[key]))
        }
        cli = {**self.defaults, **cli}
        if not cli.get(OptionKey.PROJECT_ROOT):
            cli[OptionKey.PROJECT_ROOT] = str(working_dir)
        return cli

    def find_config(self, config: OptionValue, project_root: Path) -> Path | None:
        """
        Locate fontcustom.yml.

        An explicit option may name the file or the directory holding it.
        Without one, the project root and its config/ directory are
        searched; finding nothing there is fine.
        """
        if config:
            path = expand_path(str(config), project_root)
            if path.exists() and not path.is_dir():
                return path
            candidate = path / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            raise ConfigNotFound(
                "The configuration file wasn't found. "
                f"Check `{relative_to_root(path, project_root)}` and try again."
            )

        for relative in CONFIG_SEARCH_PATHS:
            candidate = project_root / relative
            if candidate.exists():
                return candidate
        return None

    def load_config(self, config_path: Path | None, project_root: Path) -> Options:
        """Parse the config file into an option map. An empty file is no options."""
        if config_path is None:
            self.say(
                "status",
                "No configuration file set. Generate one with `fontcustom config` "
                "to preserve options between compiles.",
            )
            return {}

        self.say(
            "status",
            "Loading configuration file at "
            f"`{relative_to_root(config_path, project_root)}`.",
        )
        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigParseError(
                f"The configuration file failed to load. Message: {e}"
            ) from e

        if config is None:
            self.say("status", "Configuration file was empty. Using defaults.")
            return {}
        if not isinstance(config, Mapping):
            raise ConfigParseError(
                "The configuration file failed to load. Message: expected a "
                f"mapping of options, got {type(config).__name__}."
            )
        return normalize_options(config)

    def merge_options(self, cli: Options, manifest: Options, config: Options) -> Options:
        """
        Layer defaults, manifest, config and CLI options.

        CLI values equal to their default are dropped first, so a default the
        CLI filled in never hides a manifest or config value.
        """
        cli = {
            key: value
            for key, value in cli.items()
            if not (key in self.defaults and _same_value(value, self.defaults[key]))
        }
        return {**self.defaults, **manifest, **config, **cli}

    def manifest_path(
        self, manifest: OptionValue, config_path: Path | None, project_root: Path
    ) -> Path:
        """
        Where the manifest lives: the explicit option, next to the config
        file, or in the project root. It need not exist yet.
        """
        if manifest is not None:
            return expand_path(str(manifest), project_root)
        if config_path is not None:
            return config_path.parent / MANIFEST_FILENAME
        return project_root / MANIFEST_FILENAME

    def input_paths(self, value: OptionValue, project_root: Path) -> InputPaths:
        """Resolve and validate the vectors and templates directories."""
        shape = coerce_paths(value, InputError, "INPUT")

        if isinstance(shape, NamedPaths):
            if "vectors" not in shape.paths:
                raise InputError("INPUT (as a mapping) should contain a :vectors key.")
            vectors = self._input_dir(
                shape.paths["vectors"], project_root, "INPUT[:vectors]"
            )
            if shape.paths.get("templates") is not None:
                templates = self._input_dir(
                    shape.paths["templates"], project_root, "INPUT[:templates]"
                )
            else:
                templates = vectors
        else:
            directory = (
                expand_path(shape.path, project_root) if shape else project_root
            )
            if not directory.is_dir():
                raise InputError(
                    "INPUT (as a string) should be a directory. "
                    f"Check `{relative_to_root(directory, project_root)}` and try again."
                )
            vectors = templates = directory

        if not contains_svgs(vectors):
            raise InputError(
                f"`{relative_to_root(vectors, project_root)}` doesn't contain any SVGs."
            )
        logger.debug(f"Input: vectors={vectors} templates={templates}")
        return InputPaths(vectors=vectors, templates=templates)

    def _input_dir(self, value: OptionValue, project_root: Path, label: str) -> Path:
        if not _is_path_like(value):
            raise InputError(f"{label} should be a directory.")
        directory = expand_path(value, project_root)
        if not directory.is_dir():
            raise InputError(
                f"{label} should be a directory. "
                f"Check `{relative_to_root(directory, project_root)}` and try again."
            )
        return directory

    def output_paths(
        self, value: OptionValue, project_root: Path, font_name: str
    ) -> OutputPaths:
        """
        Resolve the fonts, css and preview directories.

        Existing paths must be directories. Without an output option
        everything goes to <project_root>/<font_name>.
        """
        shape = coerce_paths(value, OutputError, "OUTPUT")

        if isinstance(shape, NamedPaths):
            # Blank entries (e.g. `css:` in YAML) count as absent
            paths = {key: val for key, val in shape.paths.items() if val is not None}
            if "fonts" not in paths:
                raise OutputError("OUTPUT (as a mapping) should contain a :fonts key.")
            resolved = {}
            for key, val in paths.items():
                if not _is_path_like(val):
                    raise OutputError(f"OUTPUT[:{key}] should be a directory.")
                path = expand_path(val, project_root)
                if path.exists() and not path.is_dir():
                    raise OutputError(
                        f"OUTPUT[:{key}] should be a directory, not a file. "
                        f"Check `{relative_to_root(path, project_root)}` and try again."
                    )
                resolved[key] = path
            fonts = resolved.pop("fonts")
            css = resolved.pop("css", fonts)
            preview = resolved.pop("preview", fonts)
            return OutputPaths(fonts, css, preview, MappingProxyType(resolved))

        if isinstance(shape, SinglePath):
            output = expand_path(shape.path, project_root)
            if output.exists() and not output.is_dir():
                raise OutputError(
                    "OUTPUT should be a directory, not a file. "
                    f"Check `{relative_to_root(output, project_root)}` and try again."
                )
        else:
            output = project_root / font_name
            self.say(
                "status",
                "All generated files will be saved to "
                f"`{relative_to_root(output, project_root)}/`.",
            )
        return OutputPaths(fonts=output, css=output, preview=output)

    def template_paths(
        self, value: OptionValue, templates_dir: Path, project_root: Path
    ) -> tuple[Path, ...]:
        """
        Translate template names into files, keeping their order.

        Shorthands map to bundled templates; anything else is a custom
        template, looked up in the input templates directory unless absolute.
        """
        if value is None:
            return ()
        if isinstance(value, str):
            names = value.split()
        elif _is_sequence(value):
            names = list(value)
        else:
            raise TemplateError(
                "TEMPLATES should be a list of template names, "
                f"not {type(value).__name__}."
            )

        templates = []
        for name in names:
            name = str(name)
            bundled = get_bundled_template(
                name, self.template_dir, self.template_shorthands
            )
            if bundled is not None:
                templates.append(bundled)
                continue

            template = expand_path(name, templates_dir)
            if not template.is_file():
                raise TemplateError(
                    "The custom template at "
                    f"`{relative_to_root(template, project_root)}` does not exist."
                )
            templates.append(template)

        logger.debug(f"Templates: {', '.join(str(t) for t in templates)}")
        return tuple(templates)


def resolve_options(
    cli_options: RawOptions | None = None,
    manifest_options: RawOptions | None = None,
    **kwargs: Any,
) -> ResolvedOptions:
    """Resolve options with a resolver built from `kwargs`."""
    return OptionsResolver(**kwargs).resolve(cli_options, manifest_options)
