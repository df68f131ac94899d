"""Password hashing tests."""

import asyncio

import pytest

from studyhub.services import passwords
from studyhub.services.errors import InfrastructureError
from studyhub.services.passwords import (
    hash_password,
    hash_password_async,
    verify_password,
    verify_password_async,
)


@pytest.mark.parametrize("plain", ["pw1", "correct horse battery staple", "ünïcödé-påss", " "])
def test_verify_accepts_own_hash(plain):
    """A password always verifies against its own digest."""
    assert verify_password(plain, hash_password(plain))


def test_hash_uses_fresh_salt():
    """Hashing the same password twice gives different digests."""
    first = hash_password("pw1")
    second = hash_password("pw1")
    assert first != second
    assert verify_password("pw1", first)
    assert verify_password("pw1", second)


def test_hash_is_bcrypt_and_not_plaintext():
    digest = hash_password("pw1")
    assert digest.startswith("$2b$")
    assert "pw1" not in digest


def test_verify_rejects_wrong_password():
    assert not verify_password("wrong", hash_password("pw1"))


@pytest.mark.parametrize("digest", ["", "not-a-hash", "pw1"])
def test_verify_rejects_unusable_digest(digest):
    """Malformed digests never verify."""
    assert verify_password("pw1", digest) is False


def test_async_wrappers_match_sync_behaviour():
    """Async helpers run off the event loop and give the same answers."""

    async def run():
        digest = await hash_password_async("pw1")
        return (
            await verify_password_async("pw1", digest),
            await verify_password_async("nope", digest),
        )

    assert asyncio.run(run()) == (True, False)


def test_hash_failure_raises_infrastructure_error(monkeypatch):
    def broken_hash(password):
        raise ValueError("bcrypt backend unavailable")

    monkeypatch.setattr(passwords, "hash_password", broken_hash)

    with pytest.raises(InfrastructureError):
        asyncio.run(passwords.hash_password_async("pw1"))
