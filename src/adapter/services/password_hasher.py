import bcrypt
from fastapi.concurrency import run_in_threadpool

from src.app.services.password_hasher import PasswordHasher

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt implementation of PasswordHasher (cost factor 12 by default).

    bcrypt is CPU bound, so every call runs in the threadpool and the event
    loop keeps serving other requests meanwhile.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    async def hash(self, plaintext: str) -> str:
        return await run_in_threadpool(self._hash, plaintext)

    async def verify(self, plaintext: str, digest: str) -> bool:
        return await run_in_threadpool(self._verify, plaintext, digest)

    async def verify_dummy(self, plaintext: str) -> bool:
        await run_in_threadpool(bcrypt.checkpw, b"not_the_password", self._dummy_hash)
        return False

    def _hash(self, plaintext: str) -> str:
        password_bytes = plaintext.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError("Password exceeds 72 bytes")
        return bcrypt.hashpw(password_bytes, bcrypt.gensalt(self.rounds)).decode("utf-8")

    def _verify(self, plaintext: str, digest: str) -> bool:
        password_bytes = plaintext.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            # Same cost as a real check
            bcrypt.checkpw(b"dummy_password", self._dummy_hash)
            return False
        try:
            return bcrypt.checkpw(password_bytes, digest.encode("utf-8"))
        except ValueError:
            # Malformed digest
            return False
