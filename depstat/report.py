"""
Report construction and JSON serialization.

The output shape is chosen once, after ingestion: either the unordered
module mapping or the ranked list.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import IO, Union

from depstat.analytics.accumulator import ModuleRecord
from depstat.analytics.ranking import is_ranked, rank_records
from depstat.config import AnalyseOptions
from depstat.errors import SerializationError


@dataclass
class Unordered:
    modules: dict[str, ModuleRecord]


@dataclass
class Ranked:
    records: list[ModuleRecord]


Report = Union[Unordered, Ranked]


def build_report(modules: dict[str, ModuleRecord], options: AnalyseOptions) -> Report:
    if is_ranked(options.order):
        return Ranked(rank_records(modules.values(), options.order, options.limit))
    return Unordered(modules)


def record_to_dict(record: ModuleRecord) -> dict:
    return {
        "module":        record.name,
        "fan_in":        list(record.fan_in),
        "fan_out":       list(record.fan_out),
        "fan_in_count":  record.fan_in_count,
        "fan_out_count": record.fan_out_count,
        "volatile":      record.instability,
    }


def report_payload(report: Report) -> dict | list:
    """
    JSON-ready structure for a report.

    Unordered  — {module: record}, keys sorted by module name
    Ranked     — [record, ...] in rank order
    """
    if isinstance(report, Ranked):
        return [record_to_dict(r) for r in report.records]
    return {name: record_to_dict(report.modules[name]) for name in sorted(report.modules)}


def serialize_report(report: Report) -> str:
    try:
        text = json.dumps(report_payload(report), indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"output error {e}") from e
    # The ranked list is stream-encoded and therefore newline terminated.
    if isinstance(report, Ranked):
        text += "\n"
    return text


def write_report(report: Report, sink: IO[str]) -> None:
    """Serialize fully, then write; nothing reaches `sink` if encoding fails."""
    text = serialize_report(report)
    sink.write(text)
    sink.flush()
