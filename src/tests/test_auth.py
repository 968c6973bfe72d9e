"""Unit tests for password hashing and the auth gate."""

from pathlib import Path

import pytest

from miniwiki.config import WikiConfig
from miniwiki.core.auth import AuthGate, hash_password, verify_password


def make_config(password: str) -> WikiConfig:
    return WikiConfig(
        name="wiki",
        pass_hash=hash_password(password),
        editable=password != "",
        data_dir=Path("pages"),
    )


class TestHashing:
    def test_hash_is_salted(self):
        assert hash_password("secret") != hash_password("secret")

    def test_verify_correct(self):
        assert verify_password("secret", hash_password("secret"))

    def test_verify_wrong(self):
        hashed = hash_password("secret")
        assert not verify_password("Secret", hashed)
        assert not verify_password("", hashed)

    def test_verify_overlong_candidate_is_false(self):
        hashed = hash_password("secret")
        assert not verify_password("x" * 200, hashed)

    def test_verify_unicode(self):
        assert verify_password("pässwörd", hash_password("pässwörd"))


class TestAuthGate:
    def test_editable_with_password(self):
        gate = AuthGate(make_config("secret"))
        assert gate.is_editable() is True
        assert gate.verify("secret") is True
        assert gate.verify("wrong") is False

    def test_not_editable_without_password(self):
        gate = AuthGate(make_config(""))
        assert gate.is_editable() is False

    def test_empty_password_verifies_when_not_editable(self):
        # verify alone does not gate editing; callers check is_editable first
        gate = AuthGate(make_config(""))
        assert gate.verify("") is True

    @pytest.mark.parametrize("candidate", ["", " ", "secret "])
    def test_near_misses_rejected(self, candidate):
        gate = AuthGate(make_config("secret"))
        assert gate.verify(candidate) is False
