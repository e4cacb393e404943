"""Parsing of command lines into invocations."""

from __future__ import annotations

from typing import Optional

from .command import CommandInvocation, Namespace

_NAMESPACES = {
    "system": Namespace.SYSTEM,
    "module": Namespace.MODULE,
    "plugin": Namespace.PLUGIN,
    "security": Namespace.SECURITY,
    "data": Namespace.DATA,
    "ai": Namespace.AI,
    "bio": Namespace.BIO,
    "cloud": Namespace.CLOUD,
    "session": Namespace.SESSION,
    "audit": Namespace.AUDIT,
    "upgrade": Namespace.UPGRADE,
    "integrator": Namespace.INTEGRATOR,
    "custom": Namespace.CUSTOM,
    "phone": Namespace.TELEPHONY,
    "tel": Namespace.TELEPHONY,
}


class ParseError(ValueError):
    """Raised when a command line cannot be parsed."""


def parse_line(text: str) -> CommandInvocation:
    """Parse "<namespace> <action> [target] [flags...]" into an invocation.

    Words starting with '-' are flags; the first other word after the action
    is the target and any further words are kept as flags.
    """
    trimmed = text.strip()
    words = trimmed.split()
    if not words:
        raise ParseError("empty command")

    head, *rest = words
    try:
        namespace = _NAMESPACES[head]
    except KeyError:
        raise ParseError(f"unknown namespace '{head}'") from None

    if not rest:
        raise ParseError("missing action verb")

    action, *arguments = rest
    target: Optional[str] = None
    flags: list[str] = []
    for word in arguments:
        if word.startswith("-") or target is not None:
            flags.append(word)
        else:
            target = word

    return CommandInvocation(namespace, action, target, tuple(flags), trimmed)