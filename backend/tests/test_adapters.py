"""Data adapters: PBKDF2 hashing, email-validator wrapper, in-memory store."""

from unittest import mock

import pytest

from signup_service.data.adapters.email_validator_adapter import EmailValidatorAdapter
from signup_service.data.adapters.pbkdf2_encrypter import Pbkdf2Encrypter
from signup_service.data.repositories.in_memory_account_repository_impl import InMemoryAccountRepositoryImpl
from signup_service.domain.entities.account_entity import AccountData


# ─── Pbkdf2Encrypter ─────────────────────────────────────────────

async def test_encrypt_returns_encoded_hash_that_verifies():
    sut = Pbkdf2Encrypter(iterations=1000)
    encoded = await sut.encrypt("valid_password")

    assert encoded.startswith("pbkdf2_sha256$1000$")
    assert "valid_password" not in encoded
    assert sut.verify("valid_password", encoded)
    assert not sut.verify("other_password", encoded)


async def test_encrypt_salts_every_call():
    sut = Pbkdf2Encrypter(iterations=1000)
    assert await sut.encrypt("valid_password") != await sut.encrypt("valid_password")


def test_verify_rejects_malformed_hash():
    sut = Pbkdf2Encrypter(iterations=1000)
    assert not sut.verify("valid_password", "not-a-hash")
    assert not sut.verify("valid_password", "md5$1$abc$def")


def test_rejects_bad_parameters():
    with pytest.raises(ValueError):
        Pbkdf2Encrypter(iterations=0)
    with pytest.raises(ValueError):
        Pbkdf2Encrypter(salt_bytes=4)


# ─── EmailValidatorAdapter ───────────────────────────────────────

def test_email_adapter_accepts_well_formed_address():
    assert EmailValidatorAdapter().is_valid("valid@mail.com")


@pytest.mark.parametrize("email", ["invalid", "missing-at.example.com", "a@", "@example.com"])
def test_email_adapter_rejects_malformed_address(email):
    assert not EmailValidatorAdapter().is_valid(email)


def test_email_adapter_passes_deliverability_flag():
    target = "signup_service.data.adapters.email_validator_adapter.validate_email"
    with mock.patch(target) as validate_spy:
        EmailValidatorAdapter(check_deliverability=True).is_valid("valid@mail.com")
    validate_spy.assert_called_once_with("valid@mail.com", check_deliverability=True)


def test_email_adapter_propagates_unexpected_errors():
    target = "signup_service.data.adapters.email_validator_adapter.validate_email"
    with mock.patch(target, side_effect=RuntimeError("resolver crashed")):
        with pytest.raises(RuntimeError):
            EmailValidatorAdapter().is_valid("valid@mail.com")


# ─── InMemoryAccountRepositoryImpl ───────────────────────────────

async def test_repository_assigns_ids_and_stores_accounts():
    sut = InMemoryAccountRepositoryImpl()
    first = await sut.add(AccountData(name="a", email="a@mail.com", password="hash_a"))
    second = await sut.add(AccountData(name="b", email="b@mail.com", password="hash_b"))

    assert first.id != second.id
    assert first.hashed_password == "hash_a"
    assert sut.get(first.id) == first
    assert sut.get("unknown") is None


def test_verify_rejects_corrupted_encoding():
    sut = Pbkdf2Encrypter(iterations=1000)
    assert not sut.verify("valid_password", "pbkdf2_sha256$abc$!!$!!")
