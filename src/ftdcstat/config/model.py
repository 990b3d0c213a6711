# topmark:header:start
#
#   project      : FtdcStat
#   file         : model.py
#   file_relpath : src/ftdcstat/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report configuration: immutable `Config` and its `MutableConfig` builder.

Layering (later wins):
    1. built-in defaults,
    2. discovered config files, root-most first and nearest last; within one
       directory `pyproject.toml` comes before `ftdcstat.toml`,
    3. explicit ``--config`` files, in order,
    4. CLI options.

Unset values stay ``None`` in `MutableConfig` until `MutableConfig.freeze`
fills in defaults. User presets are merged by name.

Testing guidance:
    - Unit-test merge behavior with synthetic builders (no I/O).
    - Exercise TOML/discovery paths with files under ``tmp_path``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ftdcstat.config.keys import ArgKey, Toml
from ftdcstat.config.loaders import load_config_table
from ftdcstat.config.logging import get_logger
from ftdcstat.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_PRESET,
    PYPROJECT_FILE_NAME,
)

if TYPE_CHECKING:
    from ftdcstat.config.loaders import TomlTable
    from ftdcstat.config.logging import FtdcstatLogger

logger: FtdcstatLogger = get_logger(__name__)

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class ConfigError(ValueError):
    """Raised for configuration values of the wrong type or out of range."""


@dataclass(frozen=True)
class Config:
    """Immutable, fully resolved report configuration.

    Attributes:
        width (int): Value column width.
        preset (str): Base preset name.
        metrics (str | None): Custom metric list; overrides every preset.
        cpu (bool): Select the CPU preset.
        mem (bool): Select the memory preset (wins over ``cpu``).
        utc (bool): Render timestamps in UTC.
        presets (Mapping[str, str]): User presets by name.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    width: int = DEFAULT_COLUMN_WIDTH
    preset: str = DEFAULT_PRESET
    metrics: str | None = None
    cpu: bool = False
    mem: bool = False
    utc: bool = False
    presets: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    config_files: tuple[Path, ...] = ()

    def resolve_metrics_spec(self) -> str:
        """Return the metric list selected by this configuration.

        Raises:
            UnknownPresetError: If ``preset`` names no built-in or user preset.
        """
        # Imported here: the metrics package logs through ftdcstat.config.
        from ftdcstat.metrics.presets import get_preset, select_metrics_spec

        base: str = get_preset(self.preset, self.presets)
        return select_metrics_spec(base=base, cpu=self.cpu, mem=self.mem, custom=self.metrics)


@dataclass
class MutableConfig:
    """Mutable configuration builder; ``None`` means "not set at this layer"."""

    width: int | None = None
    preset: str | None = None
    metrics: str | None = None
    cpu: bool | None = None
    mem: bool | None = None
    utc: bool | None = None
    presets: dict[str, str] = field(default_factory=dict)
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Fill in defaults and return an immutable `Config`.

        Raises:
            ConfigError: If the width is not positive.
        """
        width: int = DEFAULT_COLUMN_WIDTH if self.width is None else self.width
        if width < 1:
            raise ConfigError(f"Column width must be at least 1, got {width}")
        return Config(
            width=width,
            preset=self.preset or DEFAULT_PRESET,
            metrics=self.metrics or None,
            cpu=bool(self.cpu),
            mem=bool(self.mem),
            utc=bool(self.utc),
            presets=MappingProxyType(dict(self.presets)),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a config layer from a parsed TOML table.

        Args:
            data (TomlTable): Top-level FtdcStat table.
            config_file (Path | None): Source file, used in error messages.

        Returns:
            MutableConfig: The layer; keys absent from ``data`` stay unset.

        Raises:
            ConfigError: If a key has the wrong type or an invalid value.
        """
        where: str = str(config_file) if config_file else "<config>"
        draft = cls()
        if config_file is not None:
            draft.config_files.append(config_file)

        report: Any = data.get(Toml.SECTION_REPORT, {})
        if not isinstance(report, dict):
            raise ConfigError(f"{where}: [{Toml.SECTION_REPORT}] must be a table")

        width: Any = report.get(Toml.KEY_WIDTH)
        if width is not None:
            if isinstance(width, bool) or not isinstance(width, int) or width < 1:
                raise ConfigError(f"{where}: '{Toml.KEY_WIDTH}' must be a positive integer")
            draft.width = width

        for key in (Toml.KEY_PRESET, Toml.KEY_METRICS):
            value: Any = report.get(key)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"{where}: '{key}' must be a string")
        draft.preset = report.get(Toml.KEY_PRESET)
        draft.metrics = report.get(Toml.KEY_METRICS)

        utc: Any = report.get(Toml.KEY_UTC)
        if utc is not None and not isinstance(utc, bool):
            raise ConfigError(f"{where}: '{Toml.KEY_UTC}' must be a boolean")
        draft.utc = utc

        presets: Any = data.get(Toml.SECTION_PRESETS, {})
        if not isinstance(presets, dict) or not all(
            isinstance(v, str) for v in presets.values()
        ):
            raise ConfigError(f"{where}: [{Toml.SECTION_PRESETS}] must map names to strings")
        draft.presets = {str(k): v for k, v in presets.items()}
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a config layer from ``ftdcstat.toml`` or ``pyproject.toml``.

        Returns:
            MutableConfig | None: The layer, or None when a ``pyproject.toml``
                has no ``[tool.ftdcstat]`` table.
        """
        logger.debug("Loading config from %s", path)
        table: TomlTable | None = load_config_table(path)
        if table is None:
            return None
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are ordered root-most first, nearest last; in one directory
        `pyproject.toml` precedes `ftdcstat.toml`. A file with ``root = true``
        stops the walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here = False
            entries: list[Path] = []
            for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = load_config_table(p)
                if table is None:
                    continue
                entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if bool(table.get(Toml.KEY_ROOT, False)):
                    stop_here = True
            if entries:
                per_dir.append(entries)

            parent: Path = cur.parent
            if parent == cur or stop_here:
                break
            cur = parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge discovered and explicit config files into one layer.

        Args:
            start (Path | None): Discovery anchor (defaults to the CWD).
            extra_files (list[Path] | None): Explicit config files, applied last.
            no_config (bool): Skip discovery; explicit files are still read.

        Returns:
            MutableConfig: The merged layer.
        """
        merged = cls()
        files: list[Path] = (
            [] if no_config else cls.discover_local_config_files(start or Path.cwd())
        )
        files.extend(extra_files or [])
        for path in files:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new layer where values set in ``other`` win."""
        return MutableConfig(
            width=other.width if other.width is not None else self.width,
            preset=other.preset if other.preset is not None else self.preset,
            metrics=other.metrics if other.metrics is not None else self.metrics,
            cpu=other.cpu if other.cpu is not None else self.cpu,
            mem=other.mem if other.mem is not None else self.mem,
            utc=other.utc if other.utc is not None else self.utc,
            presets={**self.presets, **other.presets},
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay CLI options; ``None`` and ``False`` flags leave values untouched."""
        if args.get(ArgKey.WIDTH) is not None:
            self.width = int(args[ArgKey.WIDTH])
        if args.get(ArgKey.PRESET):
            self.preset = str(args[ArgKey.PRESET])
        if args.get(ArgKey.METRICS):
            self.metrics = str(args[ArgKey.METRICS])
        for key in (ArgKey.CPU, ArgKey.MEM, ArgKey.UTC):
            if args.get(key):
                setattr(self, key, True)
        return self
