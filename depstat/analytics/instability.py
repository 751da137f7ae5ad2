"""
Instability metric — pure functions only.

    I = fan_out / (fan_in + fan_out)

0.0 means the module is only depended upon, 1.0 means it only depends on others.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from depstat.analytics.accumulator import ModuleRecord


def compute_instability(fan_in_count: int, fan_out_count: int) -> float | None:
    total = fan_in_count + fan_out_count
    if total <= 0:
        return None
    return fan_out_count / total


def update_instability(record: ModuleRecord) -> None:
    """Refresh record.instability from its cached counts; no-op when both are zero."""
    value = compute_instability(record.fan_in_count, record.fan_out_count)
    if value is not None:
        record.instability = value
