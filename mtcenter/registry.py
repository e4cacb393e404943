"""Mapping of (namespace, action) pairs to command handlers."""

from __future__ import annotations

import threading
from typing import Callable

from .command import CommandInvocation, CommandResult, Namespace

CommandHandler = Callable[[CommandInvocation], CommandResult]


class Registry:
    """A thread-safe table of command handlers."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._handlers: dict[tuple[Namespace, str], CommandHandler] = {}

    def register(self, namespace: Namespace, action: str, handler: CommandHandler) -> None:
        """Install a handler, replacing any previous one for the same pair."""
        with self._lock:
            self._handlers[(namespace, action)] = handler

    def dispatch(self, cmd: CommandInvocation) -> CommandResult:
        """Run the handler for the command, or fail if none is registered."""
        with self._lock:
            handler = self._handlers.get((cmd.namespace, cmd.action))
        if handler is None:
            return CommandResult.failure(f"no handler for {cmd.namespace} {cmd.action}")
        return handler(cmd)


_global_registry = Registry()


def global_registry() -> Registry:
    """The process-wide registry."""
    return _global_registry


def dispatch(cmd: CommandInvocation) -> CommandResult:
    """Dispatch through the process-wide registry."""
    return _global_registry.dispatch(cmd)