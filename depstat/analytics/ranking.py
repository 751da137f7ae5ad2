"""
Module ranking — pure functions only.
"""
from __future__ import annotations

from typing import Iterable

from depstat.analytics.accumulator import ModuleRecord

ORDER_FAN_IN    = "fan-in"
ORDER_FAN_OUT   = "fan-out"
ORDER_VOLATILE  = "volatile"

_SORT_KEYS = {
    ORDER_FAN_IN:   lambda r: r.fan_in_count,
    ORDER_FAN_OUT:  lambda r: r.fan_out_count,
    ORDER_VOLATILE: lambda r: r.instability,
}

ORDER_KEYS = tuple(_SORT_KEYS)


def is_ranked(order: str | None) -> bool:
    return order in _SORT_KEYS


def rank_records(
    records: Iterable[ModuleRecord],
    order: str,
    limit: int = 0,
) -> list[ModuleRecord]:
    """
    Sort records descending on the metric named by `order`.

    records — typically modules.values(); equal values keep their input order
    order   — one of ORDER_KEYS
    limit   — keep the first `limit` entries when > 0
    """
    if not is_ranked(order):
        raise ValueError(f"unknown order {order!r}, expected one of {', '.join(ORDER_KEYS)}")
    ranked = sorted(records, key=_SORT_KEYS[order], reverse=True)
    if limit > 0:
        ranked = ranked[:limit]
    return ranked
