from abc import ABC, abstractmethod


class Encrypter(ABC):
    @abstractmethod
    async def encrypt(self, value: str) -> str:
        """One-way transform of a plaintext secret into its stored form."""
        raise NotImplementedError
