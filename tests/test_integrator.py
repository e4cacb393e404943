import dataclasses
import uuid
from datetime import datetime, timezone

from mtcenter.integrator import TelemetryEvent, register_flow, start_session


def test_register_flow_keeps_inputs():
    flow = register_flow("provider", "https://app.example.com/callback")
    assert flow.provider == "provider"
    assert flow.redirect_uri == "https://app.example.com/callback"
    assert str(uuid.UUID(flow.id)) == flow.id


def test_register_flow_timestamp_is_utc_now():
    before = datetime.now(timezone.utc)
    flow = register_flow("p", "r")
    created = datetime.fromisoformat(flow.created_at)
    assert before <= created <= datetime.now(timezone.utc)


def test_start_session_keeps_agent():
    session = start_session("agent/1.0")
    assert session.user_agent == "agent/1.0"
    assert str(uuid.UUID(session.id)) == session.id
    assert datetime.fromisoformat(session.created_at).utcoffset().total_seconds() == 0


def test_session_ids_are_unique():
    ids = {start_session("a").id for _ in range(5)}
    assert len(ids) == 5


def test_telemetry_event_as_dict():
    event = TelemetryEvent(id="t1", label="call", created_at="now")
    assert dataclasses.asdict(event) == {"id": "t1", "label": "call", "created_at": "now"}