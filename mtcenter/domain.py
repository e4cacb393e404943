"""Core domain records: modules, plugins, sessions, users, assets and audit events."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class AuditEvent:
    """A recorded action taken by an actor against a target."""

    id: str
    timestamp: datetime
    actor: str
    action: str
    target: str
    details: str


@dataclass(frozen=True)
class GdbAsset:
    """An asset ingested into the in-memory data lake."""

    id: str
    source: str
    created_at: datetime
    checksum: str


class ModuleStatus(str, enum.Enum):
    """Lifecycle state of a module."""

    AVAILABLE = "Available"
    LOADED = "Loaded"
    ERROR = "Error"
    UPGRADE_PENDING = "UpgradePending"


@dataclass(frozen=True)
class Module:
    """A loadable module known to the command center."""

    id: str
    name: str
    version: str
    module_type: str
    binary_location: str
    description: str
    status: ModuleStatus
    registered_at: datetime


@dataclass(frozen=True)
class Plugin:
    """A plugin registered from a binary on disk."""

    id: str
    name: str
    version: str
    binary_path: str
    description: str
    registered_at: datetime


@dataclass(frozen=True)
class SessionSnapshot:
    """A saved point in the session history."""

    id: str
    created_at: datetime
    description: str


@dataclass(frozen=True)
class User:
    """A user account."""

    id: str
    display_name: str
    dna_profile_hash: Optional[str]
    mfa_enabled: bool
    created_at: datetime


_loaded_lock = threading.Lock()
_loaded_modules: set[str] = set()


def load_module(name: str) -> bool:
    """Mark the named module as loaded; every name is accepted."""
    with _loaded_lock:
        _loaded_modules.add(name)
    return True