# topmark:header:start
#
#   project      : FtdcStat
#   file         : presets.py
#   file_relpath : src/ftdcstat/metrics/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in metric presets.

Each preset is a metric list in the definition language (see
[`ftdcstat.metrics.spec`][]). Users may add their own presets in the
``[presets]`` table of the configuration file.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from ftdcstat.metrics.spec import clean_metrics

if TYPE_CHECKING:
    from collections.abc import Mapping

GENERAL_METRICS: Final[str] = clean_metrics(
    """
    serverStatus/opcounters/insert+serverStatus/opcountersRepl/insert,insert,d;
    serverStatus/opcounters/query+serverStatus/opcountersRepl/query,query,d;
    serverStatus/opcounters/update+serverStatus/opcountersRepl/update,update,d;
    serverStatus/opcounters/delete+serverStatus/opcountersRepl/delete,delete,d;
    serverStatus/opcounters/getmore+serverStatus/opcountersRepl/getmore,getmore,d;
    serverStatus/opcounters/command+serverStatus/opcountersRepl/command,command,d;
    serverStatus/connections/current,conn,;
    replSetGetStatus/myState,state,;
    serverStatus/mem/resident,res_M,;
    serverStatus/mem/virtual,vsize_M,;
    serverStatus/uptime,uptime,;
    """
)

CPU_METRICS: Final[str] = clean_metrics(
    """
    systemMetrics/cpu/btime,btime,d;
    systemMetrics/cpu/ctxt,ctxt,d;
    systemMetrics/cpu/idle_ms,idle,d;
    systemMetrics/cpu/iowait_ms,iowait,d;
    systemMetrics/cpu/irq_ms,irq,d;
    systemMetrics/cpu/nice_ms,nice,d;
    systemMetrics/cpu/procs_running,procs_run,;
    systemMetrics/cpu/softirq_ms,softirq,d;
    systemMetrics/cpu/steal_ms,steal_ms,d;
    systemMetrics/cpu/system_ms,system,d;
    systemMetrics/cpu/user_ms,user,d;
    """
)

MEM_METRICS: Final[str] = clean_metrics(
    """
    systemMetrics/memory/Active_kb,Active,;
    systemMetrics/memory/Buffers_kb,Buffers,;
    systemMetrics/memory/Cached_kb,Cached,;
    systemMetrics/memory/Dirty_kb,Dirty,;
    systemMetrics/memory/Inactive_kb,Inactive,;
    systemMetrics/memory/MemFree_kb,MemFree,;
    systemMetrics/memory/MemTotal_kb,MemTotal,;
    systemMetrics/memory/SwapCached_kb,SwapCached,;
    systemMetrics/memory/SwapFree_kb,SwapFree,;
    systemMetrics/memory/SwapTotal_kb,SwapTotal,;
    """
)


class Preset(str, Enum):
    """Names of the built-in presets."""

    GENERAL = "general"
    CPU = "cpu"
    MEM = "mem"


BUILTIN_PRESETS: Final[dict[str, str]] = {
    Preset.GENERAL.value: GENERAL_METRICS,
    Preset.CPU.value: CPU_METRICS,
    Preset.MEM.value: MEM_METRICS,
}


class UnknownPresetError(KeyError):
    """Raised when a preset name is neither built in nor user-defined."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        return f"Unknown preset '{self.name}' (known: {', '.join(self.known)})"


def available_presets(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return built-in presets merged with user presets.

    User presets shadow built-ins with the same name. Values are cleaned.
    """
    merged: dict[str, str] = dict(BUILTIN_PRESETS)
    for name, text in (extra or {}).items():
        merged[name] = clean_metrics(text)
    return merged


def get_preset(name: str, extra: Mapping[str, str] | None = None) -> str:
    """Return the metric list of a preset.

    Args:
        name (str): Preset name (``general``, ``cpu``, ``mem`` or a user preset).
        extra (Mapping[str, str] | None): User presets from configuration.

    Returns:
        str: The cleaned metric list.

    Raises:
        UnknownPresetError: If no preset has this name.
    """
    presets: dict[str, str] = available_presets(extra)
    try:
        return presets[name]
    except KeyError:
        raise UnknownPresetError(name, sorted(presets)) from None


def select_metrics_spec(
    *,
    base: str = GENERAL_METRICS,
    cpu: bool = False,
    mem: bool = False,
    custom: str | None = None,
) -> str:
    """Pick the metric list for a run.

    Selectors are evaluated in the order ``base → cpu → mem → custom``; each
    requested one replaces the previous choice. A memory request therefore
    wins over a CPU request, and a non-empty custom list wins over both.

    Args:
        base (str): Starting point, normally the general preset.
        cpu (bool): Select the CPU preset.
        mem (bool): Select the memory preset.
        custom (str | None): Explicit metric list.

    Returns:
        str: The selected metric list.
    """
    selected: str = base
    if cpu:
        selected = CPU_METRICS
    if mem:
        selected = MEM_METRICS
    if custom:
        selected = custom
    return selected
