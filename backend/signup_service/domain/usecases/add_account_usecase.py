from dataclasses import replace

from signup_service.domain.entities.account_entity import Account, AccountData
from signup_service.domain.repositories.add_account_repository import AddAccountRepository
from signup_service.domain.repositories.encrypter import Encrypter
from signup_service.domain.usecases.add_account import AddAccount


class AddAccountUseCase(AddAccount):
    """Use case for registering a new account."""

    def __init__(self, encrypter: Encrypter, repository: AddAccountRepository) -> None:
        self._encrypter = encrypter
        self._repo = repository

    async def add(self, account_data: AccountData) -> Account:
        """
        Hash the password and persist the account.

        Args:
            account_data: Validated account fields with the plaintext password.

        Returns:
            The account returned by the repository.

        Raises:
            Whatever the encrypter or repository raise; nothing is caught here.
        """
        hashed_password = await self._encrypter.encrypt(account_data.password)
        return await self._repo.add(replace(account_data, password=hashed_password))
