"""Processing engines: analysis, biometrics, cloud sync, data lake and chat integrator."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class AnalysisReport:
    """Status of an analysis run over a dataset."""

    id: str
    dataset: str
    started_at: str
    status: str
    notes: str


def analyze_dataset(dataset: str) -> AnalysisReport:
    """Start analysing a dataset and report its initial state."""
    return AnalysisReport(
        id=str(uuid.uuid4()),
        dataset=dataset,
        started_at=datetime.now(timezone.utc).isoformat(),
        status="running",
        notes="analysis pipeline initialized",
    )


_bio_lock = threading.Lock()
_enrolled_biometrics: set[str] = set()


def enroll_biometric(user_id: str) -> bool:
    """Record a user's biometric enrollment; always succeeds."""
    with _bio_lock:
        _enrolled_biometrics.add(user_id)
    return True


_sync_lock = threading.Lock()
_sync_history: list[tuple[datetime, bool]] = []


def sync_state(snapshot: bool) -> bool:
    """Synchronise state to the cloud, optionally as a snapshot; always succeeds."""
    with _sync_lock:
        _sync_history.append((datetime.now(timezone.utc), snapshot))
    return True


def ingest_source(source: str) -> str:
    """Ingest a source into the data lake and return its id."""
    del source
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return f"gdb_{stamp}_{uuid.uuid4()}"


class _ChatIntegrator:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.enabled = False

    def enable(self) -> None:
        with self._lock:
            self.enabled = True


_chat = _ChatIntegrator()


def enable_integrator_chat() -> bool:
    """Switch the chat integrator on."""
    _chat.enable()
    return True


def is_integrator_chat_enabled() -> bool:
    """Whether the chat integrator has been switched on."""
    return _chat.enabled