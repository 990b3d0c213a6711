# topmark:header:start
#
#   project      : FtdcStat
#   file         : loaders.py
#   file_relpath : src/ftdcstat/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from ftdcstat.config.logging import get_logger
from ftdcstat.constants import PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from ftdcstat.config.logging import FtdcstatLogger

TomlTable = dict[str, Any]

logger: FtdcstatLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``ftdcstat.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def load_config_table(path: Path) -> TomlTable | None:
    """Return the FtdcStat table of a config file.

    For ``pyproject.toml`` this is the ``[tool.ftdcstat]`` table; any other
    file is used as a whole. Returns None if a ``pyproject.toml`` has no
    such table.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(table, dict):
        logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", table)
