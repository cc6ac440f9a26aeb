"""Tests for sentinel_ui data models."""

import pytest
from pydantic import ValidationError

from sentinel_ui.models import MetricsSnapshot, ProcessInfo, ProposedAction, Risk

DAEMON_LINE = (
    '{"timestamp":"2025-01-01T10:00:00+01:00","memory_total":17179869184,'
    '"memory_used":12884901888,"memory_free":4294967296,"memory_percent":75.0,'
    '"swap_total":4294967296,"swap_used":0,"swap_percent":0.0,'
    '"load_1m":1.5,"load_5m":1.2,"load_15m":1.0,'
    '"top_processes":[{"pid":42,"parent_pid":1,"name":"Safari","memory_bytes":1073741824,'
    '"memory_mb":1024.0,"cpu_usage":3.5,"exe":"/Applications/Safari.app"}],'
    '"aggregated_processes":[],"memory_growth_rate":null}'
)


def test_snapshot_from_daemon_json():
    snapshot = MetricsSnapshot.model_validate_json(DAEMON_LINE)

    assert snapshot.memory_percent == 75.0
    assert snapshot.memory_growth_rate is None
    assert snapshot.top_processes[0] == ProcessInfo(
        name="Safari",
        memory_mb=1024.0,
        cpu_usage=3.5,
        pid=42,
        parent_pid=1,
        memory_bytes=1073741824,
        exe="/Applications/Safari.app",
    )
    assert snapshot.load_1m == 1.5


def test_snapshot_is_frozen():
    snapshot = MetricsSnapshot.model_validate_json(DAEMON_LINE)
    with pytest.raises(ValidationError):
        snapshot.memory_percent = 10.0


def test_snapshot_requires_core_fields():
    with pytest.raises(ValidationError):
        MetricsSnapshot.model_validate_json('{"memory_percent": 10}')


def test_proposed_action_keeps_full_payload():
    data = {
        "action_type": "kill_process",
        "description": "Close Chrome",
        "risk": "high",
        "pid": 4242,
    }
    action = ProposedAction.from_payload(data)

    assert action.description == "Close Chrome"
    assert action.risk is Risk.HIGH
    assert action.is_high_risk
    assert action.payload == data


def test_proposed_action_moderate():
    action = ProposedAction.from_payload({"description": "Clear caches", "risk": "moderate"})
    assert action.risk is Risk.MODERATE
    assert not action.is_high_risk


def test_proposed_action_rejects_unknown_risk():
    with pytest.raises(ValidationError):
        ProposedAction.from_payload({"description": "x", "risk": "extreme"})


def test_proposed_action_requires_description():
    with pytest.raises(KeyError):
        ProposedAction.from_payload({"risk": "high"})
