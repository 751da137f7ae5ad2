"""
Unit tests for analytics/accumulator.py and analytics/instability.py.

Tests cover:
  - update_module_dep: append semantics on both endpoints
  - count and instability invariants after every edge
  - accumulate: fail-fast on malformed lines
"""
import pytest

from depstat.analytics.accumulator import ModuleRecord, accumulate, update_module_dep
from depstat.analytics.instability import compute_instability, update_instability
from depstat.errors import ParseError

from conftest import build_modules, edge


def assert_invariants(modules: dict):
    for name, r in modules.items():
        assert r.name == name
        assert r.fan_in_count == len(r.fan_in)
        assert r.fan_out_count == len(r.fan_out)
        total = r.fan_in_count + r.fan_out_count
        assert total > 0
        assert r.instability == r.fan_out_count / total


# ── instability ────────────────────────────────────────────────────────────────

class TestInstability:
    def test_pure_dependent(self):
        assert compute_instability(0, 3) == 1.0

    def test_pure_dependency(self):
        assert compute_instability(4, 0) == 0.0

    def test_balanced(self):
        assert compute_instability(2, 2) == 0.5

    def test_float_division(self):
        assert compute_instability(2, 1) == pytest.approx(1 / 3)

    def test_zero_counts_leave_value_unchanged(self):
        r = ModuleRecord("orphan", instability=0.25)
        update_instability(r)
        assert r.instability == 0.25

    def test_update_uses_cached_counts(self):
        r = ModuleRecord("m", fan_in_count=1, fan_out_count=3)
        update_instability(r)
        assert r.instability == 0.75


# ── update_module_dep ──────────────────────────────────────────────────────────

class TestUpdateModuleDep:
    def test_single_edge(self):
        modules = build_modules(("A", "B"))
        a, b = modules["A"], modules["B"]
        assert a.fan_out == ["B"] and a.fan_in == []
        assert a.fan_out_count == 1 and a.instability == 1.0
        assert b.fan_in == ["A"] and b.fan_out == []
        assert b.fan_in_count == 1 and b.instability == 0.0

    def test_duplicate_edge_recorded_twice(self):
        modules = build_modules(("A", "B"), ("A", "B"))
        assert modules["A"].fan_out == ["B", "B"]
        assert modules["A"].fan_out_count == 2
        assert modules["B"].fan_in == ["A", "A"]

    def test_self_loop(self):
        modules = build_modules(("A", "A"))
        a = modules["A"]
        assert list(modules) == ["A"]
        assert a.fan_out == ["A"] and a.fan_in == ["A"]
        assert a.fan_in_count == 1 and a.fan_out_count == 1
        assert a.instability == 0.5

    def test_fan_in_keeps_arrival_order(self):
        modules = build_modules(("C", "B"), ("A", "B"), ("C", "B"))
        assert modules["B"].fan_in == ["C", "A", "C"]

    def test_mapping_keeps_first_reference_order(self):
        modules = build_modules(("x", "y"), ("z", "x"))
        assert list(modules) == ["x", "y", "z"]

    def test_each_edge_appends_exactly_once(self, layered_modules):
        before_out = list(layered_modules["app"].fan_out)
        before_in  = list(layered_modules["db"].fan_in)
        update_module_dep(layered_modules, "app", "db")
        assert layered_modules["app"].fan_out == before_out + ["db"]
        assert layered_modules["db"].fan_in == before_in + ["app"]

    def test_invariants_hold_after_every_edge(self):
        from conftest import LAYERED_EDGES
        modules: dict = {}
        for src, dst in LAYERED_EDGES + [("log", "log"), ("app", "service")]:
            update_module_dep(modules, src, dst)
            assert_invariants(modules)

    def test_layered_counts(self, layered_modules):
        svc = layered_modules["service"]
        assert svc.fan_in == ["app", "cli"]
        assert svc.fan_out == ["db", "log"]
        assert svc.instability == 0.5
        assert layered_modules["log"].fan_in_count == 3
        assert layered_modules["log"].instability == 0.0


# ── accumulate ─────────────────────────────────────────────────────────────────

class TestAccumulate:
    def test_extends_existing_mapping(self):
        modules = build_modules(("A", "B"))
        out = accumulate([edge("B", "C")], modules)
        assert out is modules
        assert modules["B"].fan_out == ["C"]

    def test_empty_input(self):
        assert accumulate([]) == {}

    def test_malformed_line_stops_consumption(self):
        consumed = []

        def lines():
            for line in [edge("A", "B"), "A -> B", edge("C", "D")]:
                consumed.append(line)
                yield line

        with pytest.raises(ParseError) as exc:
            accumulate(lines())
        assert exc.value.line == "A -> B"
        assert len(consumed) == 2

    def test_fresh_runs_are_identical(self, layered_text):
        first  = accumulate(layered_text.splitlines())
        second = accumulate(layered_text.splitlines())
        assert first == second
