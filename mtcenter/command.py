"""Command invocations and their results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional


class Namespace(enum.Enum):
    """The area of the command center a command addresses."""

    SYSTEM = "System"
    MODULE = "Module"
    PLUGIN = "Plugin"
    SECURITY = "Security"
    DATA = "Data"
    AI = "Ai"
    BIO = "Bio"
    CLOUD = "Cloud"
    SESSION = "Session"
    AUDIT = "Audit"
    UPGRADE = "Upgrade"
    INTEGRATOR = "Integrator"
    CUSTOM = "Custom"
    TELEPHONY = "Telephony"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CommandInvocation:
    """A parsed command line."""

    namespace: Namespace
    action: str
    target: Optional[str] = None
    flags: tuple[str, ...] = field(default_factory=tuple)
    raw: str = ""

    def has_flag(self, flag: str) -> bool:
        """Whether the exact flag was given."""
        return flag in self.flags


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running a command, with an optional JSON-ready payload."""

    ok: bool
    message: str
    payload: Optional[Any] = None

    @classmethod
    def success(cls, message: str, payload: Optional[Any] = None) -> "CommandResult":
        """A successful result, optionally carrying a payload."""
        return cls(ok=True, message=message, payload=payload)

    @classmethod
    def failure(cls, message: str) -> "CommandResult":
        """A failed result."""
        return cls(ok=False, message=message)