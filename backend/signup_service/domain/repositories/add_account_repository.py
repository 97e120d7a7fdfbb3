from abc import ABC, abstractmethod

from signup_service.domain.entities.account_entity import Account, AccountData


class AddAccountRepository(ABC):
    """Interface for persisting new accounts."""

    @abstractmethod
    async def add(self, account_data: AccountData) -> Account:
        """
        Store a new account.

        Args:
            account_data: Account fields with the password already hashed.

        Returns:
            The stored account, including its generated id.
        """
        raise NotImplementedError
