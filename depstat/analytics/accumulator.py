"""
Dependency accumulation — pure functions over an explicitly owned mapping.

Each edge updates both endpoints: the source gains a fan-out entry and the
destination gains a fan-in entry. Repeated edges are recorded every time.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from depstat.analytics.edges import parse_edge_line
from depstat.analytics.instability import update_instability


@dataclass
class ModuleRecord:
    name:          str
    fan_in:        list[str] = field(default_factory=list)
    fan_out:       list[str] = field(default_factory=list)
    fan_in_count:  int       = 0
    fan_out_count: int       = 0
    instability:   float     = 0.0

    def add_fan_in(self, module: str) -> None:
        self.fan_in.append(module)
        self.fan_in_count = len(self.fan_in)

    def add_fan_out(self, module: str) -> None:
        self.fan_out.append(module)
        self.fan_out_count = len(self.fan_out)


def _get_or_create(modules: dict[str, ModuleRecord], name: str) -> ModuleRecord:
    record = modules.get(name)
    if record is None:
        record = ModuleRecord(name)
        modules[name] = record
    return record


def update_module_dep(modules: dict[str, ModuleRecord], src: str, dst: str) -> None:
    """
    Record one `src -> dst` edge in `modules`, in place.

    A self-loop goes through both steps against the same record.
    """
    st = _get_or_create(modules, src)
    st.add_fan_out(dst)
    update_instability(st)

    st = _get_or_create(modules, dst)
    st.add_fan_in(src)
    update_instability(st)


def accumulate(
    lines: Iterable[str],
    modules: dict[str, ModuleRecord] | None = None,
) -> dict[str, ModuleRecord]:
    """
    Parse and record every line in order.

    Stops at the first malformed line by letting ParseError propagate; no
    further lines are pulled from `lines`.
    """
    if modules is None:
        modules = {}
    for line in lines:
        src, dst = parse_edge_line(line)
        update_module_dep(modules, src, dst)
    return modules
