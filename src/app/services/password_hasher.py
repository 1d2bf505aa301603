import asyncio

import bcrypt


class PasswordHasher:
    """
    bcrypt hashing with a fixed work factor.

    bcrypt is deliberately slow, so the async helpers run it in a worker
    thread instead of on the event loop.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        # Verified against when the user does not exist, so a miss costs
        # the same as a wrong password
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    def burn(self, password: str) -> bool:
        """Verify against a throwaway hash; always False"""
        bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
        return False

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self.verify, password, password_hash)

    async def burn_async(self, password: str) -> bool:
        return await asyncio.to_thread(self.burn, password)
