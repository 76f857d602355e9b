"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_MAX_FILE_SIZE, LIST_BULLETS


@dataclass
class EditorConfig:
    """Configuration for markdown syntax insertion and export.

    Attributes:
        default_bullet: Bullet used for new bulleted lists and restored when a
            list session resets (``"-"``, ``"*"`` or ``"+"``).
        bold_syntax: Delimiter inserted around bold text (``"**"`` or ``"__"``).
        italic_syntax: Delimiter inserted around italic text (``"_"`` or ``"*"``).
        code_syntax: Delimiter inserted around inline code (one or more backticks).
        max_file_size: Maximum file size in bytes the CLI will read.

    Examples:
        EditorConfig(default_bullet="*", italic_syntax="*")
    """

    # List markers
    default_bullet: str = "-"

    # Wrap delimiters
    bold_syntax: str = "**"
    italic_syntax: str = "_"
    code_syntax: str = "`"

    # Limits
    max_file_size: int = DEFAULT_MAX_FILE_SIZE


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`default_bullet` must be one of: -, *, +")
    """


def load_config(search_path: Path) -> EditorConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.marklight-editor]`` table from `pyproject.toml` and the
    ``[marklight-editor]`` or ``[tool.marklight-editor]`` table from
    `.marklight-editor.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        EditorConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "marklight-editor")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".marklight-editor.toml",
            table_paths=[("marklight-editor",), ("tool", "marklight-editor")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return EditorConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> EditorConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> EditorConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    try:
        return EditorConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: EditorConfig) -> None:
    """Validate an `EditorConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a delimiter or bullet is unsupported or the size limit
            is not a positive integer.

    Examples:
        validate_config(EditorConfig(bold_syntax="__"))
    """
    if config.default_bullet not in LIST_BULLETS:
        raise ConfigError(f"`default_bullet` must be one of: {', '.join(LIST_BULLETS)}")
    if config.bold_syntax not in ("**", "__"):
        raise ConfigError("`bold_syntax` must be one of: **, __")
    if config.italic_syntax not in ("_", "*"):
        raise ConfigError("`italic_syntax` must be one of: _, *")
    if (
        not isinstance(config.code_syntax, str)
        or not config.code_syntax
        or config.code_syntax.strip("`")
    ):
        raise ConfigError("`code_syntax` must be a run of backticks")

    if isinstance(config.max_file_size, bool) or not isinstance(config.max_file_size, int):
        raise ConfigError("`max_file_size` must be an integer")
    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")


def apply_overrides(config: EditorConfig, **overrides: object) -> EditorConfig:
    """Apply override values to an `EditorConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        EditorConfig: New configuration with the overrides applied, or the
        original configuration when no changes are supplied.

    Raises:
        TypeError: If an override name is not defined on `EditorConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> EditorConfig:
    """Load, override, and validate configuration.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), default_bullet="*")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config
