from typing import Optional

from signup_service.core.config.environment_config import EnvironmentConfig
from signup_service.core.utils.logger import configure_logging, get_logger
from signup_service.data.adapters.email_validator_adapter import EmailValidatorAdapter
from signup_service.data.adapters.pbkdf2_encrypter import Pbkdf2Encrypter
from signup_service.data.repositories.in_memory_account_repository_impl import InMemoryAccountRepositoryImpl
from signup_service.domain.usecases.add_account_usecase import AddAccountUseCase
from signup_service.presentation.controllers.signup_controller import SignUpController
from signup_service.presentation.protocols.email_validator import EmailValidator
from signup_service.presentation.validation.signup_validation import make_signup_validation
from signup_service.presentation.validation.validation_composite import ValidationComposite


logger = get_logger("service_locator")


class ServiceLocator:
    _config: Optional[EnvironmentConfig] = None
    _encrypter: Optional[Pbkdf2Encrypter] = None
    _account_repository: Optional[InMemoryAccountRepositoryImpl] = None
    _add_account_usecase: Optional[AddAccountUseCase] = None
    _email_validator: Optional[EmailValidator] = None
    _signup_validation: Optional[ValidationComposite] = None
    _signup_controller: Optional[SignUpController] = None

    @classmethod
    def config(cls) -> EnvironmentConfig:
        if cls._config is None:
            cls._config = EnvironmentConfig()
            configure_logging(cls._config.log_level)
            logger.info(
                "[config] APP_ENV=%s PASSWORD_HASH_ITERATIONS=%s EMAIL_CHECK_DELIVERABILITY=%s",
                cls._config.app_env,
                cls._config.password_hash_iterations,
                cls._config.email_check_deliverability,
            )
        return cls._config

    @classmethod
    def encrypter(cls) -> Pbkdf2Encrypter:
        if cls._encrypter is None:
            cfg = cls.config()
            cls._encrypter = Pbkdf2Encrypter(iterations=cfg.password_hash_iterations, salt_bytes=cfg.password_salt_bytes)
        return cls._encrypter

    @classmethod
    def account_repository(cls) -> InMemoryAccountRepositoryImpl:
        if cls._account_repository is None:
            cls._account_repository = InMemoryAccountRepositoryImpl()
        return cls._account_repository

    @classmethod
    def add_account_usecase(cls) -> AddAccountUseCase:
        if cls._add_account_usecase is None:
            cls._add_account_usecase = AddAccountUseCase(encrypter=cls.encrypter(), repository=cls.account_repository())
        return cls._add_account_usecase

    @classmethod
    def email_validator(cls) -> EmailValidator:
        if cls._email_validator is None:
            cls._email_validator = EmailValidatorAdapter(check_deliverability=cls.config().email_check_deliverability)
        return cls._email_validator

    @classmethod
    def signup_validation(cls) -> ValidationComposite:
        if cls._signup_validation is None:
            cls._signup_validation = make_signup_validation(cls.email_validator())
        return cls._signup_validation

    @classmethod
    def signup_controller(cls) -> SignUpController:
        if cls._signup_controller is None:
            cls._signup_controller = SignUpController(validation=cls.signup_validation(), add_account=cls.add_account_usecase())
        return cls._signup_controller

    @classmethod
    def reset(cls) -> None:
        """Drop every cached instance so the next access rebuilds it."""
        cls._config = None
        cls._encrypter = None
        cls._account_repository = None
        cls._add_account_usecase = None
        cls._email_validator = None
        cls._signup_validation = None
        cls._signup_controller = None
