"""Integrator API records: authorization flows, chat sessions and telemetry."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class AuthzFlowState:
    """A pending authorization flow with an external provider."""

    id: str
    provider: str
    redirect_uri: str
    created_at: str


@dataclass(frozen=True)
class ChatSession:
    """A chat bridge session for a user agent."""

    id: str
    user_agent: str
    created_at: str


@dataclass(frozen=True)
class TelemetryEvent:
    """A labelled telemetry event."""

    id: str
    label: str
    created_at: str


def register_flow(provider: str, redirect_uri: str) -> AuthzFlowState:
    """Begin an authorization flow."""
    return AuthzFlowState(
        id=str(uuid.uuid4()),
        provider=provider,
        redirect_uri=redirect_uri,
        created_at=_timestamp(),
    )


def start_session(agent: str) -> ChatSession:
    """Open a chat session for the agent."""
    return ChatSession(id=str(uuid.uuid4()), user_agent=agent, created_at=_timestamp())