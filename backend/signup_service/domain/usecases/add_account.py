from abc import ABC, abstractmethod

from signup_service.domain.entities.account_entity import Account, AccountData


class AddAccount(ABC):
    """Interface for registering a new account."""

    @abstractmethod
    async def add(self, account_data: AccountData) -> Account:
        raise NotImplementedError
