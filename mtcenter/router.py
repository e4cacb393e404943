"""Built-in command handlers and their installation into a registry."""

from __future__ import annotations

import dataclasses
import enum
from datetime import datetime, timezone
from typing import Any, Optional

from . import engines, security, telephony
from .command import CommandInvocation, CommandResult, Namespace
from .domain import load_module
from .registry import Registry, global_registry
from .storage import MemoryStore, default_store

_TARGET_PREFIX = "--target="


def _to_json(value: Any) -> Any:
    """Convert records into plain JSON-ready values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if isinstance(value, dict):
        return {str(k): _to_json(v) for k, v in value.items()}
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, datetime):
        text = value.isoformat()
        if value.tzinfo is not None and value.utcoffset() == timezone.utc.utcoffset(None):
            text = text.removesuffix("+00:00") + "Z"
        return text
    return value


def _strip_all(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def init_registry(registry: Optional[Registry] = None, store: Optional[MemoryStore] = None) -> None:
    """Install every built-in command into the registry, backed by the store."""
    reg = registry if registry is not None else global_registry()
    mem = store if store is not None else default_store()

    def system_crawl(cmd: CommandInvocation) -> CommandResult:
        target = next(
            (_strip_all(f, _TARGET_PREFIX) for f in cmd.flags if f.startswith(_TARGET_PREFIX)),
            ".",
        )
        assets = mem.crawl_and_ingest(target)
        return CommandResult.success(
            f"system crawl complete for {target}", {"ingested": _to_json(assets)}
        )

    def system_status(cmd: CommandInvocation) -> CommandResult:
        return CommandResult.success(
            "system status",
            {
                "modules_loaded": len(mem.list_modules()),
                "latest_snapshot": mem.latest_snapshot_id(),
            },
        )

    def module_avail(cmd: CommandInvocation) -> CommandResult:
        return CommandResult.success("available modules", _to_json(mem.list_modules()))

    def module_load(cmd: CommandInvocation) -> CommandResult:
        name = cmd.target
        if name is None:
            return CommandResult.failure("module name required")
        if load_module(name):
            return CommandResult.success(f"module '{name}' loaded")
        return CommandResult.failure(f"failed to load module '{name}'")

    def plugin_register(cmd: CommandInvocation) -> CommandResult:
        path = cmd.target
        if path is None:
            return CommandResult.failure("plugin binary path required")
        plugin = mem.register_plugin(path)
        return CommandResult.success(f"plugin registered from {path}", _to_json(plugin))

    def security_audit(cmd: CommandInvocation) -> CommandResult:
        return CommandResult.success("security audit", _to_json(mem.all_events()))

    def security_mfa(cmd: CommandInvocation) -> CommandResult:
        user = cmd.target
        if cmd.has_flag("--enroll"):
            if user is not None and security.enroll_user(user):
                return CommandResult.success(f"MFA enrolled for {user}")
            return CommandResult.failure("MFA enroll failed, user required")
        if cmd.has_flag("--verify"):
            if user is not None and security.verify_user(user):
                return CommandResult.success(f"MFA verified for {user}")
            return CommandResult.failure("MFA verify failed, user required")
        return CommandResult.failure("MFA requires --enroll or --verify")

    def data_ingest(cmd: CommandInvocation) -> CommandResult:
        source = cmd.target
        if source is None:
            return CommandResult.failure("data source required")
        gdb_id = engines.ingest_source(source)
        return CommandResult.success(f"data ingested from {source}", {"gdb_id": gdb_id})

    def ai_analyze(cmd: CommandInvocation) -> CommandResult:
        dataset = cmd.target
        if dataset is None:
            return CommandResult.failure("dataset path or gdb id required")
        report = engines.analyze_dataset(dataset)
        return CommandResult.success("ai analysis started", _to_json(report))

    def bio_enroll(cmd: CommandInvocation) -> CommandResult:
        user = cmd.target
        if user is None:
            return CommandResult.failure("user id required")
        if engines.enroll_biometric(user):
            return CommandResult.success(f"biometric enrolled for {user}")
        return CommandResult.failure("biometric enrollment failed")

    def cloud_sync(cmd: CommandInvocation) -> CommandResult:
        if engines.sync_state(cmd.has_flag("--snapshot")):
            return CommandResult.success("cloud sync complete")
        return CommandResult.failure("cloud sync failed")

    def session_save(cmd: CommandInvocation) -> CommandResult:
        if not cmd.has_flag("--now"):
            return CommandResult.failure("--now flag required")
        snapshot_id = mem.create_snapshot("manual session save")
        return CommandResult.success("session saved", {"snapshot_id": snapshot_id})

    def session_rollback(cmd: CommandInvocation) -> CommandResult:
        snap = cmd.target
        if snap is None:
            return CommandResult.failure("snapshot id required")
        if mem.rollback_to(snap):
            return CommandResult.success(f"rolled back to {snap}")
        return CommandResult.failure("rollback failed")

    def integrator_chat(cmd: CommandInvocation) -> CommandResult:
        if cmd.has_flag("--enable"):
            if engines.enable_integrator_chat():
                return CommandResult.success("AI-Chat integrator enabled")
            return CommandResult.failure("failed to enable integrator")
        return CommandResult.failure("integrator chat requires --enable")

    def tel_profile(cmd: CommandInvocation) -> CommandResult:
        if cmd.has_flag("--list"):
            return CommandResult.success("phone profiles", _to_json(telephony.list_profiles()))
        return CommandResult.failure("phone profile requires --list")

    def tel_dial(cmd: CommandInvocation) -> CommandResult:
        number = cmd.target
        if number is None:
            return CommandResult.failure("phone number required")
        return CommandResult.success("dial initiated", _to_json(telephony.dial_number(number)))

    handlers = [
        (Namespace.SYSTEM, "crawl", system_crawl),
        (Namespace.SYSTEM, "status", system_status),
        (Namespace.MODULE, "avail", module_avail),
        (Namespace.MODULE, "load", module_load),
        (Namespace.PLUGIN, "register", plugin_register),
        (Namespace.SECURITY, "audit", security_audit),
        (Namespace.SECURITY, "mfa", security_mfa),
        (Namespace.DATA, "ingest", data_ingest),
        (Namespace.AI, "analyze", ai_analyze),
        (Namespace.BIO, "enroll", bio_enroll),
        (Namespace.CLOUD, "sync", cloud_sync),
        (Namespace.SESSION, "rollback", session_rollback),
        (Namespace.SESSION, "save", session_save),
        (Namespace.INTEGRATOR, "chat", integrator_chat),
        (Namespace.TELEPHONY, "profile", tel_profile),
        (Namespace.TELEPHONY, "dial", tel_dial),
    ]
    for namespace, action, handler in handlers:
        reg.register(namespace, action, handler)