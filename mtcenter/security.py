"""Encryption, multi-factor authentication and access policy."""

from __future__ import annotations

import base64
import os
import random
from typing import Optional, Protocol

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_SIZE = 32
NONCE_SIZE = 12

_enrolled: set[str] = set()
_denied_rules: frozenset[tuple[str, str, str]] = frozenset()


class _RandomSource(Protocol):
    def random(self) -> float: ...


def encrypt_aes256(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt with AES-256-GCM and return nonce + ciphertext + tag."""
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    nonce = os.urandom(NONCE_SIZE)
    sealed = AESGCM(bytes(key)).encrypt(nonce, bytes(plaintext), None)
    return nonce + sealed


def encrypt_aes256_base64(key: bytes, plaintext: bytes) -> str:
    """Encrypt like encrypt_aes256 and return standard base64 text."""
    return base64.b64encode(encrypt_aes256(key, plaintext)).decode("ascii")


def enroll_user(user_id: str) -> bool:
    """Record a user as enrolled for MFA; enrollment always succeeds."""
    _enrolled.add(user_id)
    return user_id in _enrolled


def verify_user(user_id: str, rng: Optional[_RandomSource] = None) -> bool:
    """Verify a user's MFA challenge; passes nine times in ten."""
    del user_id
    source = rng if rng is not None else random
    return source.random() < 0.9


def is_allowed(actor: str, action: str, target: str) -> bool:
    """Policy check against the deny rules; none are defined, so all pass."""
    return (actor, action, target) not in _denied_rules