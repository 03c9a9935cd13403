from __future__ import annotations

from passlib.context import CryptContext


class PasswordHasher:
    """bcrypt hashes for stored user passwords."""

    def __init__(self, rounds: int | None = None) -> None:
        options = {"bcrypt__rounds": rounds} if rounds else {}
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", **options)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        try:
            return self._context.verify(password, hashed_password)
        except ValueError:
            # not a recognised hash (e.g. a plaintext password from older data)
            return False
