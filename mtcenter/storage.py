"""In-memory storage for modules, assets, audit events, users and session snapshots."""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Optional

from .domain import (
    AuditEvent,
    GdbAsset,
    Module,
    ModuleStatus,
    Plugin,
    SessionSnapshot,
    User,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _infer_name(path: str) -> str:
    name = PurePath(path).name
    if name in ("", ".."):
        return "unknown"
    return name


class MemoryStore:
    """Thread-safe in-memory collections backing the command center."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._modules: list[Module] = []
        self._gdb: list[GdbAsset] = []
        self._audit: list[AuditEvent] = []
        self._users: list[User] = []
        self._sessions: list[SessionSnapshot] = []

    def crawl_and_ingest(self, target: str) -> list[GdbAsset]:
        """Record an asset for the target and return the newly ingested assets."""
        asset = GdbAsset(
            id=f"gdb_{uuid.uuid4()}",
            source=target,
            created_at=_now(),
            checksum="checksum-placeholder",
        )
        with self._lock:
            self._gdb.append(asset)
        return [asset]

    @property
    def assets(self) -> list[GdbAsset]:
        """All ingested assets, oldest first."""
        with self._lock:
            return list(self._gdb)

    def all_events(self) -> list[AuditEvent]:
        """All recorded audit events."""
        with self._lock:
            return list(self._audit)

    def list_modules(self) -> list[Module]:
        """All known modules."""
        with self._lock:
            return list(self._modules)

    def register_plugin(self, path: str) -> Plugin:
        """Describe a plugin for the binary at path."""
        return Plugin(
            id=str(uuid.uuid4()),
            name=_infer_name(path),
            version="1.0.0",
            binary_path=path,
            description="auto-registered plugin",
            registered_at=_now(),
        )

    def seed(self) -> None:
        """Add the built-in module unless modules are already present."""
        with self._lock:
            if self._modules:
                return
            self._modules.append(
                Module(
                    id=str(uuid.uuid4()),
                    name="DNA_MFA_Module",
                    version="1.0.0",
                    module_type="Security",
                    binary_location="/modules/dna_mfa.bin",
                    description="DNA-based multi-factor authentication module",
                    status=ModuleStatus.AVAILABLE,
                    registered_at=_now(),
                )
            )

    def latest_snapshot_id(self) -> Optional[str]:
        """Id of the most recent snapshot, or None if there is none."""
        with self._lock:
            return self._sessions[-1].id if self._sessions else None

    def create_snapshot(self, description: str) -> str:
        """Store a new snapshot and return its id."""
        snap = SessionSnapshot(
            id=f"snap_{uuid.uuid4()}",
            created_at=_now(),
            description=description,
        )
        with self._lock:
            self._sessions.append(snap)
        return snap.id

    def rollback_to(self, snapshot_id: str) -> bool:
        """Make the given snapshot the latest one, dropping newer snapshots.

        Returns False when no snapshot has that id.
        """
        with self._lock:
            for position, snap in enumerate(self._sessions):
                if snap.id == snapshot_id:
                    del self._sessions[position + 1:]
                    return True
        return False

    def all_users(self) -> list[User]:
        """All known users."""
        with self._lock:
            return list(self._users)


_default_store = MemoryStore()


def default_store() -> MemoryStore:
    """The process-wide store."""
    return _default_store