"""Namespaced command shell with in-memory storage, security helpers and simulated telephony."""

__version__ = "0.1.0"