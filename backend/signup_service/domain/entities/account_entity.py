from dataclasses import dataclass


@dataclass(frozen=True)
class AccountData:
    """Fields required to register an account.

    - name: display name of the account holder
    - email: login address
    - password: plaintext on the way in, the hash once encrypted
    """
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class Account:
    """Account as stored by the persistence layer."""
    id: str
    name: str
    email: str
    hashed_password: str
