"""Password hashing with bcrypt.

bcrypt is CPU-bound (hundreds of ms at cost 12) and runs off the event
loop using anyio.to_thread.run_sync().
"""

from typing import Protocol, runtime_checkable

import bcrypt
from anyio import to_thread

DEFAULT_ROUNDS = 12


@runtime_checkable
class PasswordHasher(Protocol):
    """Hash and verify passwords."""

    async def hash(self, plain: str) -> str: ...

    async def verify(self, plain: str, hashed: str) -> bool: ...

    async def burn(self, plain: str) -> None: ...


class BcryptHasher:
    """bcrypt hasher (async, off-thread)."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds
        # Verified against when the account does not exist
        self._dummy_hash = bcrypt.hashpw(b"wordcapture", bcrypt.gensalt(rounds))

    async def hash(self, plain: str) -> str:
        encoded = plain.encode("utf-8")
        rounds = self._rounds
        return await to_thread.run_sync(
            lambda: bcrypt.hashpw(encoded, bcrypt.gensalt(rounds)).decode("utf-8")
        )

    async def verify(self, plain: str, hashed: str) -> bool:
        """Return False for malformed hashes rather than propagating a ValueError."""
        encoded_plain = plain.encode("utf-8")
        encoded_hash = hashed.encode("utf-8")
        try:
            return await to_thread.run_sync(lambda: bcrypt.checkpw(encoded_plain, encoded_hash))
        except ValueError:
            return False

    async def burn(self, plain: str) -> None:
        """Spend one verification's worth of time against a throwaway hash.

        Used when the account does not exist so the response time matches a
        wrong-password attempt.
        """
        await self.verify(plain, self._dummy_hash.decode("utf-8"))
