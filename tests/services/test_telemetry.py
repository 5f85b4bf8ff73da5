"""Tests for step timings and the @traced decorator."""

from __future__ import annotations

from meetcount.services.result import ServiceResult
from meetcount.services.telemetry import Span, current_span, set_telemetry, trace_span, traced


class _Service:
    @traced
    def run(self, items: int) -> ServiceResult:
        with trace_span("load") as step:
            if step is not None:
                step.annotate("items", items)
        with trace_span("count"):
            pass
        return ServiceResult(ok=True, op="run", meta={"source": "test"})

    @traced
    def fail(self) -> ServiceResult:
        return ServiceResult.failure("fail", "INVALID_INPUT", "bad")


class TestSpan:
    def test_duration_zero_until_stopped(self) -> None:
        span = Span("x")
        assert span.duration_ms == 0.0
        span.stop()
        assert span.duration_ms >= 0.0

    def test_to_dict_omits_empty_parts(self) -> None:
        assert set(Span("bare").to_dict()) == {"name", "duration_ms"}

    def test_to_dict_nests_children(self) -> None:
        parent = Span("parent")
        parent.children.append(Span("child"))
        parent.annotate("k", "v")
        data = parent.to_dict()
        assert data["annotations"] == {"k": "v"}
        assert data["children"][0]["name"] == "child"


class TestTraced:
    def test_disabled_leaves_result_alone(self) -> None:
        result = _Service().run(2)
        assert result.meta == {"source": "test"}
        assert current_span() is None

    def test_enabled_attaches_tree(self) -> None:
        set_telemetry(True)
        result = _Service().run(2)
        assert result.meta is not None
        assert result.meta["source"] == "test"
        tree = result.meta["telemetry"]
        assert tree["name"] == "run"
        assert [c["name"] for c in tree["children"]] == ["load", "count"]
        assert tree["children"][0]["annotations"] == {"items": 2}

    def test_failure_still_traced(self) -> None:
        set_telemetry(True)
        result = _Service().fail()
        assert not result.ok
        assert result.meta is not None
        assert result.meta["telemetry"]["name"] == "fail"

    def test_span_closed_after_call(self) -> None:
        set_telemetry(True)
        _Service().run(1)
        assert current_span() is None


class TestTraceSpan:
    def test_outside_traced_call_yields_none(self) -> None:
        set_telemetry(True)
        with trace_span("orphan") as span:
            assert span is None

    def test_disabled_yields_none(self) -> None:
        with trace_span("step") as span:
            assert span is None
