# topmark:header:start
#
#   project      : FtdcStat
#   file         : spec.py
#   file_relpath : src/ftdcstat/metrics/spec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Metric definition language.

A metric list is a single string of definitions separated by ``;``. Each
definition is a comma-separated triple::

    sourceKeyExpr,displayName,deltaFlag

- ``sourceKeyExpr`` is one or more raw series names joined by ``+``; the
  values of these series are summed into one column.
- ``displayName`` is the column label (may be empty).
- ``deltaFlag`` is ``d`` for a rate column (per-interval increase); anything
  else yields an instantaneous column.

Whitespace (space, tab, CR, LF) is removed from the *whole* string before
splitting, display names included. One trailing ``;`` is dropped.

A definition with fewer than three fields is accepted but renders as a
constant zero column. This is never an error: a report must survive a single
bad definition.

Example:
    ```python
    metrics = parse_metrics(
        "serverStatus/opcounters/insert+serverStatus/opcountersRepl/insert,insert,d;"
        "serverStatus/connections/current,conn,;"
    )
    assert [m.display_name for m in metrics] == ["insert", "conn"]
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ftdcstat.config.logging import get_logger

logger = get_logger(__name__)

DEFINITION_SEPARATOR: Final[str] = ";"
FIELD_SEPARATOR: Final[str] = ","
KEY_SEPARATOR: Final[str] = "+"
DELTA_FLAG: Final[str] = "d"

WHITESPACE_CHARS: Final[tuple[str, ...]] = (" ", "\t", "\n", "\r")

# sourceKeyExpr, displayName, deltaFlag
FIELD_COUNT: Final[int] = 3


@dataclass(frozen=True)
class MetricDef:
    """One report column.

    Attributes:
        source_keys (tuple[str, ...]): Raw series names summed into this column.
            Empty for a malformed definition.
        display_name (str): Header label; may be empty.
        is_delta (bool): Plot the per-interval increase instead of the raw value.
        malformed (bool): The definition had fewer than three fields; the column
            renders as a constant zero.
    """

    source_keys: tuple[str, ...]
    display_name: str = ""
    is_delta: bool = False
    malformed: bool = False

    @classmethod
    def zero_column(cls, display_name: str = "") -> MetricDef:
        """Return the placeholder used for a definition with too few fields."""
        return cls(source_keys=(), display_name=display_name, is_delta=False, malformed=True)


def clean_metrics(text: str) -> str:
    """Normalize a metric list string before tokenizing.

    Args:
        text (str): Raw metric list as written by the user or a preset.

    Returns:
        str: The text with all whitespace removed and a single trailing ``;`` dropped.
    """
    for ch in WHITESPACE_CHARS:
        text = text.replace(ch, "")
    if text.endswith(DEFINITION_SEPARATOR):
        text = text[: -len(DEFINITION_SEPARATOR)]
    return text


def split_definitions(text: str) -> list[str]:
    """Split a cleaned metric list into its definitions."""
    return text.split(DEFINITION_SEPARATOR)


def split_fields(definition: str) -> list[str]:
    """Split a definition on its first two commas.

    The third field keeps any further commas, so ``a,b,d,x`` yields the flag
    ``d,x`` (which is not a delta flag).
    """
    return definition.split(FIELD_SEPARATOR, FIELD_COUNT - 1)


def build_metric(definition: str) -> MetricDef:
    """Build a `MetricDef` from one cleaned definition.

    Args:
        definition (str): A single ``sourceKeyExpr,displayName,deltaFlag`` triple.

    Returns:
        MetricDef: The structured definition, or a zero column when fewer than
            three fields are present.
    """
    fields: list[str] = split_fields(definition)
    if len(fields) < FIELD_COUNT:
        display_name: str = fields[1] if len(fields) >= 2 else ""
        logger.debug(
            "Metric definition %r has %d field(s); rendering zeros", definition, len(fields)
        )
        return MetricDef.zero_column(display_name)

    key_expr, display_name, flag = fields
    return MetricDef(
        source_keys=tuple(key_expr.split(KEY_SEPARATOR)),
        display_name=display_name,
        is_delta=flag == DELTA_FLAG,
    )


def parse_metrics(text: str) -> list[MetricDef]:
    """Parse a metric list into column definitions, in declaration order.

    Args:
        text (str): Metric list in the definition language.

    Returns:
        list[MetricDef]: One entry per definition.
    """
    metrics: list[MetricDef] = [build_metric(d) for d in split_definitions(clean_metrics(text))]
    logger.debug("Parsed %d metric definition(s)", len(metrics))
    return metrics
