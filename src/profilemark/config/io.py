# profilemark:header:start
#
#   project      : ProfileMark
#   file         : io.py
#   file_relpath : src/profilemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Load, validate and render TOML provisioning plans.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures. The bundled annotated plan ``profilemark-default.toml``
and the static files it references are read with `importlib.resources`.

Two families of helpers live here:
- document I/O (`load_toml_file`, `load_default_plan_text`, `to_toml`), and
- *checked* getters that raise `ConfigError` when a value has the wrong shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from profilemark.config.logging import get_logger
from profilemark.constants import (
    DEFAULT_PLAN_NAME,
    DEFAULT_PLAN_PACKAGE,
    PLAN_RESOURCES_DIR,
    PROFILEMARK_END_MARKER,
)
from profilemark.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)

TomlTable = dict[str, Any]


# --- Document I/O ---


def parse_toml_text(text: str, *, source: str) -> TomlTable:
    """Parse TOML ``text`` into a plain dict.

    Args:
        text (str): TOML document.
        source (str): Label used in error messages (usually a path).

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        ConfigError: If the document is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"{source}: invalid TOML: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_file(path: Path) -> TomlTable:
    """Read and parse a TOML plan from disk.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"{path}: cannot read plan: {exc.strerror or exc}") from exc
    logger.debug("Loaded plan file %s (%d characters)", path, len(text))
    return parse_toml_text(text, source=str(path))


def _strip_file_header(text: str) -> str:
    """Drop everything up to and including the ``profilemark:header:end`` line."""
    lines: list[str] = text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {PROFILEMARK_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return text


def load_default_plan_text() -> str:
    """Return the bundled, annotated default plan as TOML text.

    The file header block is stripped so the output starts at the plan itself.

    Raises:
        ConfigError: If the packaged plan cannot be read.
    """
    resource = files(DEFAULT_PLAN_PACKAGE).joinpath(DEFAULT_PLAN_NAME)
    try:
        text = resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read bundled plan {DEFAULT_PLAN_NAME}: {exc}") from exc
    return _strip_file_header(text)


def load_default_plan_dict() -> TomlTable:
    """Return the bundled default plan parsed into a dict."""
    return parse_toml_text(load_default_plan_text(), source=DEFAULT_PLAN_NAME)


def load_plan_resource_text(name: str) -> str:
    """Return the text of a static file bundled for plans (e.g. ``starship.toml``).

    Raises:
        ConfigError: If no such resource is bundled.
    """
    resource = files(DEFAULT_PLAN_PACKAGE).joinpath(PLAN_RESOURCES_DIR, name)
    try:
        return resource.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unknown bundled resource {name!r}: {exc}") from exc


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists.

    TOML has no `null`, so keys with None values and None list items are dropped.
    """
    if isinstance(value, Mapping):
        out: dict[str, object] = {}
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        for k_any, v_any in m.items():
            if v_any is None:
                continue
            out[str(k_any)] = _strip_none_for_toml(v_any)
        return out
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Multi-line strings (block bodies, inline file contents) are rendered as
    multi-line literal strings when they contain no ``'''`` sequence.
    """
    cleaned = cast("TomlTable", _strip_none_for_toml(data))
    return cast("str", cast("Any", tomlkit).dumps(_multiline_strings(cleaned)))


def _multiline_strings(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _multiline_strings(v) for k, v in cast("dict[str, Any]", value).items()}
    if isinstance(value, list):
        return [_multiline_strings(v) for v in cast("list[Any]", value)]
    if isinstance(value, str) and "\n" in value and "'''" not in value:
        # The newline right after the opening quotes is dropped by TOML parsers.
        return tomlkit.string("\n" + value, literal=True, multiline=True)
    return value


# --- Checked getters ---


def _where(context: str, key: str) -> str:
    return f"{context}.{key}" if context else key


def get_str(
    table: Mapping[str, Any], key: str, *, context: str = "", default: str | None = None
) -> str:
    """Return a required string value.

    Args:
        table (Mapping[str, Any]): Table to query.
        key (str): Key to extract.
        context (str): Dotted location of ``table`` used in error messages.
        default (str | None): Value used when the key is missing; if None the
            key is required.

    Raises:
        ConfigError: If the key is missing without default, or not a string.
    """
    value = table.get(key)
    if value is None:
        if default is None:
            raise ConfigError(f"Missing required key '{_where(context, key)}'")
        return default
    if not isinstance(value, str):
        raise ConfigError(
            f"'{_where(context, key)}' must be a string, got {type(value).__name__}"
        )
    return value


def get_optional_str(table: Mapping[str, Any], key: str, *, context: str = "") -> str | None:
    """Return an optional string value (None when absent)."""
    if table.get(key) is None:
        return None
    return get_str(table, key, context=context)


def get_bool(
    table: Mapping[str, Any], key: str, *, context: str = "", default: bool = False
) -> bool:
    """Return a boolean value, ``default`` when absent.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value = table.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(
            f"'{_where(context, key)}' must be a boolean, got {type(value).__name__}"
        )
    return value


def get_str_list(table: Mapping[str, Any], key: str, *, context: str = "") -> list[str]:
    """Return a list of strings, empty when absent.

    Raises:
        ConfigError: If the value is not a list of strings.
    """
    value = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(item, str) for item in cast("list[Any]", value)
    ):
        raise ConfigError(f"'{_where(context, key)}' must be a list of strings")
    return list(cast("list[str]", value))


def get_table(table: Mapping[str, Any], key: str, *, context: str = "") -> TomlTable:
    """Return a sub-table, empty when absent.

    Raises:
        ConfigError: If the value is not a table.
    """
    value = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{_where(context, key)}' must be a table")
    return cast("TomlTable", value)


def get_table_list(table: Mapping[str, Any], key: str) -> list[TomlTable]:
    """Return an array of tables, empty when absent.

    Raises:
        ConfigError: If the value is not an array of tables.
    """
    value = table.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(item, dict) for item in cast("list[Any]", value)
    ):
        raise ConfigError(f"'{key}' must be an array of tables ([[{key}]])")
    return list(cast("list[TomlTable]", value))
