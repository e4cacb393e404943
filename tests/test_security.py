import base64

import pytest
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from mtcenter.security import (
    encrypt_aes256,
    encrypt_aes256_base64,
    enroll_user,
    is_allowed,
    verify_user,
)

KEY = bytes(range(32))


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _decrypt(blob, key=KEY):
    return AESGCM(key).decrypt(blob[:12], blob[12:], None)


@pytest.mark.parametrize("plaintext", [b"", b"hello", b"x" * 1000])
def test_encrypt_round_trip(plaintext):
    blob = encrypt_aes256(KEY, plaintext)
    assert len(blob) == 12 + len(plaintext) + 16
    assert _decrypt(blob) == plaintext


def test_encrypt_uses_fresh_nonce():
    a = encrypt_aes256(KEY, b"same")
    b = encrypt_aes256(KEY, b"same")
    assert a[:12] != b[:12]
    assert _decrypt(a) == _decrypt(b) == b"same"


@pytest.mark.parametrize("size", [0, 16, 24, 31, 33])
def test_encrypt_rejects_wrong_key_size(size):
    with pytest.raises(ValueError):
        encrypt_aes256(bytes(size), b"data")


def test_base64_round_trip():
    text = encrypt_aes256_base64(KEY, b"payload")
    assert _decrypt(base64.b64decode(text, validate=True)) == b"payload"


def test_enroll_user_succeeds():
    assert enroll_user("alice") is True


def test_verify_user_passes_below_threshold():
    assert verify_user("alice", FixedRandom(0.0)) is True
    assert verify_user("alice", FixedRandom(0.5)) is True


def test_verify_user_fails_at_or_above_threshold():
    assert verify_user("alice", FixedRandom(0.9)) is False
    assert verify_user("alice", FixedRandom(0.99)) is False


def test_is_allowed_permits_everything():
    assert is_allowed("alice", "delete", "everything") is True