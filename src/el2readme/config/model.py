# topmark:header:start
#
#   project      : El2Readme
#   file         : model.py
#   file_relpath : src/el2readme/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration and its mutable builder.

Configuration layers are merged last-wins:

1. runtime defaults (`MutableConfig.from_defaults`),
2. the discovered project file (``el2readme.toml`` or ``[tool.el2readme]`` in
   ``pyproject.toml``) or an explicit ``--config`` file,
3. programmatic overrides (API keyword arguments, CLI options).

Use `MutableConfig.freeze` to obtain the `Config` snapshot consumed by the
pipeline, and `Config.thaw` to go back to an editable builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from el2readme.config.keys import Toml
from el2readme.config.loaders import (
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from el2readme.config.logging import get_logger
from el2readme.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_COMMENT_MARKER,
    DEFAULT_FILE_EXTENSION,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_SRC_LANGUAGE,
    DEFAULT_TOOL_URL,
    PYPROJECT_FILE_NAME,
)

if TYPE_CHECKING:
    from el2readme.config.loaders import TomlTable
    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for El2Readme.

    Attributes:
        comment_marker (str): Line comment marker that introduces header lines (``;;``).
        file_extension (str): File extension token removed from the title line (``.el``).
        src_language (str): Language name used on generated source blocks.
        output_name (str): Default output file name (``README.org``).
        tool_url (str): Project link used in the generated-by attribution line.
        config_files (tuple[Path, ...]): Configuration files that contributed to this snapshot.
    """

    comment_marker: str = DEFAULT_COMMENT_MARKER
    file_extension: str = DEFAULT_FILE_EXTENSION
    src_language: str = DEFAULT_SRC_LANGUAGE
    output_name: str = DEFAULT_OUTPUT_NAME
    tool_url: str = DEFAULT_TOOL_URL
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            comment_marker=self.comment_marker,
            file_extension=self.file_extension,
            src_language=self.src_language,
            output_name=self.output_name,
            tool_url=self.tool_url,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Every value is optional (``None`` = inherit) so that layers can be merged
    without losing information. `freeze` fills the remaining gaps with the
    runtime defaults.
    """

    comment_marker: str | None = None
    file_extension: str | None = None
    src_language: str | None = None
    output_name: str | None = None
    tool_url: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config.

        Raises:
            ValueError: If the comment marker is empty.
        """
        if self.comment_marker is not None and not self.comment_marker:
            raise ValueError("Config invalid: `comment_marker` cannot be empty.")
        return Config(
            comment_marker=self.comment_marker or DEFAULT_COMMENT_MARKER,
            file_extension=self.file_extension or DEFAULT_FILE_EXTENSION,
            src_language=self.src_language or DEFAULT_SRC_LANGUAGE,
            output_name=self.output_name or DEFAULT_OUTPUT_NAME,
            tool_url=self.tool_url or DEFAULT_TOOL_URL,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values from ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """

        def _pick(mine: str | None, theirs: str | None) -> str | None:
            return theirs if theirs is not None else mine

        return MutableConfig(
            comment_marker=_pick(self.comment_marker, other.comment_marker),
            file_extension=_pick(self.file_extension, other.file_extension),
            src_language=_pick(self.src_language, other.src_language),
            output_name=_pick(self.output_name, other.output_name),
            tool_url=_pick(self.tool_url, other.tool_url),
            config_files=self.config_files + other.config_files,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a draft from a parsed TOML table.

        Args:
            data (TomlTable): Top-level El2Readme table (``[convert]`` lives below it).
            config_file (Path | None): Source file, recorded in ``config_files``.

        Returns:
            MutableConfig: The parsed draft; missing keys stay ``None``.
        """
        convert_tbl: TomlTable = get_table_value(data, Toml.SECTION_CONVERT)
        for key in convert_tbl:
            if key not in Toml.CONVERT_KEYS:
                logger.warning(
                    "Unknown key '%s' in [%s] (%s)",
                    key,
                    Toml.SECTION_CONVERT,
                    config_file or "defaults",
                )
        draft = cls(
            comment_marker=get_string_value_or_none(convert_tbl, Toml.KEY_COMMENT_MARKER),
            file_extension=get_string_value_or_none(convert_tbl, Toml.KEY_FILE_EXTENSION),
            src_language=get_string_value_or_none(convert_tbl, Toml.KEY_SRC_LANGUAGE),
            output_name=get_string_value_or_none(convert_tbl, Toml.KEY_OUTPUT_NAME),
            tool_url=get_string_value_or_none(convert_tbl, Toml.KEY_TOOL_URL),
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``el2readme.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.el2readme]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft if successful; None if the
                ``[tool.el2readme]`` section is missing from ``pyproject.toml``.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_FILE_NAME:
            tool_section: TomlTable = get_table_value(get_table_value(toml_data, "tool"), "el2readme")
            if not tool_section:
                logger.debug("[tool.el2readme] section missing in %s", path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest config file found by walking upward from ``start``.

        In a given directory ``el2readme.toml`` wins over ``pyproject.toml``; the
        latter only counts when it carries a ``[tool.el2readme]`` table.
        """
        anchor: Path = start if start.is_dir() else start.parent
        for directory in (anchor, *anchor.parents):
            candidate: Path = directory / CONFIG_FILE_NAME
            if candidate.is_file():
                return candidate
            pyproject: Path = directory / PYPROJECT_FILE_NAME
            if pyproject.is_file() and cls.from_toml_file(pyproject) is not None:
                return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        start: Path | None = None,
        overrides: MutableConfig | None = None,
    ) -> MutableConfig:
        """Merge defaults, a project config file and overrides (last wins).

        Args:
            config_path (Path | None): Explicit config file; disables discovery.
            start (Path | None): Discovery anchor (defaults to the working directory).
            overrides (MutableConfig | None): Highest-precedence layer.

        Returns:
            MutableConfig: The merged draft.
        """
        merged: MutableConfig = cls.from_defaults()

        source: Path | None = config_path
        if source is None:
            source = cls.discover_config_file(start or Path.cwd())
        if source is not None:
            layer: MutableConfig | None = cls.from_toml_file(source)
            if layer is not None:
                logger.info("Using configuration from %s", source)
                merged = merged.merge_with(layer)

        if overrides is not None:
            merged = merged.merge_with(overrides)
        return merged
