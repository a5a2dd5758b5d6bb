"""
Unit tests for BcryptPasswordHasher
"""

import asyncio

import pytest


@pytest.mark.asyncio
async def test_hash_is_not_plaintext(password_hasher):
    digest = await password_hasher.hash("strongPassword123")

    assert digest != "strongPassword123"
    assert digest.startswith("$2")
    assert len(digest) == 60


@pytest.mark.asyncio
async def test_hash_is_salted(password_hasher):
    first = await password_hasher.hash("strongPassword123")
    second = await password_hasher.hash("strongPassword123")

    assert first != second


@pytest.mark.asyncio
async def test_verify(password_hasher):
    digest = await password_hasher.hash("strongPassword123")

    assert await password_hasher.verify("strongPassword123", digest) is True
    assert await password_hasher.verify("strongPassword124", digest) is False


@pytest.mark.asyncio
async def test_verify_malformed_digest(password_hasher):
    assert await password_hasher.verify("strongPassword123", "not-a-bcrypt-hash") is False


@pytest.mark.asyncio
async def test_verify_oversized_password(password_hasher):
    digest = await password_hasher.hash("a" * 72)
    assert await password_hasher.verify("a" * 73, digest) is False


@pytest.mark.asyncio
async def test_hash_rejects_oversized_password(password_hasher):
    with pytest.raises(ValueError):
        await password_hasher.hash("a" * 73)


@pytest.mark.asyncio
async def test_verify_dummy_never_matches(password_hasher):
    assert await password_hasher.verify_dummy("dummy_password") is False
    assert await password_hasher.verify_dummy("anything") is False


@pytest.mark.asyncio
async def test_hashing_does_not_block_event_loop(password_hasher):
    """Other coroutines keep running while a hash is computed"""
    ticks = 0

    async def ticker():
        nonlocal ticks
        while True:
            ticks += 1
            await asyncio.sleep(0)

    task = asyncio.create_task(ticker())
    try:
        await password_hasher.hash("strongPassword123")
    finally:
        task.cancel()

    assert ticks > 0
