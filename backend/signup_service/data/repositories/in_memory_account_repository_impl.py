from typing import Dict, Optional
from uuid import uuid4

from signup_service.core.utils.logger import get_logger
from signup_service.domain.entities.account_entity import Account, AccountData
from signup_service.domain.repositories.add_account_repository import AddAccountRepository


logger = get_logger("account_repository")


class InMemoryAccountRepositoryImpl(AddAccountRepository):
    """Process-local account store keyed by generated id."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    async def add(self, account_data: AccountData) -> Account:
        account = Account(
            id=uuid4().hex,
            name=account_data.name,
            email=account_data.email,
            hashed_password=account_data.password,
        )
        self._accounts[account.id] = account
        logger.info("Stored account %s", account.id)
        return account

    def get(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)
