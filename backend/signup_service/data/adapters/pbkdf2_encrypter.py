import asyncio
import base64
import hashlib
import hmac
import os

from signup_service.domain.repositories.encrypter import Encrypter


ALGORITHM = "pbkdf2_sha256"


class Pbkdf2Encrypter(Encrypter):
    """Password hasher based on PBKDF2-HMAC-SHA256.

    Encoded form: ``pbkdf2_sha256$<iterations>$<salt_b64>$<hash_b64>``.
    Hashing runs in a worker thread so the event loop is not blocked.
    """

    def __init__(self, iterations: int = 260000, salt_bytes: int = 16) -> None:
        if iterations < 1:
            raise ValueError("iterations must be positive")
        if salt_bytes < 8:
            raise ValueError("salt_bytes must be at least 8")
        self.iterations = iterations
        self.salt_bytes = salt_bytes

    def _derive(self, value: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", value.encode("utf-8"), salt, iterations)

    def _encode(self, value: str) -> str:
        salt = os.urandom(self.salt_bytes)
        digest = self._derive(value, salt, self.iterations)
        salt_b64 = base64.b64encode(salt).decode("ascii")
        hash_b64 = base64.b64encode(digest).decode("ascii")
        return f"{ALGORITHM}${self.iterations}${salt_b64}${hash_b64}"

    async def encrypt(self, value: str) -> str:
        return await asyncio.to_thread(self._encode, value)

    def verify(self, value: str, encoded: str) -> bool:
        try:
            algorithm, iterations, salt_b64, hash_b64 = encoded.split("$")
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        try:
            salt = base64.b64decode(salt_b64, validate=True)
            expected = base64.b64decode(hash_b64, validate=True)
            rounds = int(iterations)
        except ValueError:
            return False
        digest = self._derive(value, salt, rounds)
        return hmac.compare_digest(digest, expected)
