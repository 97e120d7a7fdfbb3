import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv


# Values from .env override blanks inherited from the container environment.
load_dotenv(dotenv_path=os.path.join(os.getcwd(), ".env"), override=True)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _as_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class EnvironmentConfig:
    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # PBKDF2-SHA256 work factor and salt size for stored passwords
    password_hash_iterations: int = int(os.getenv("PASSWORD_HASH_ITERATIONS", "260000"))
    password_salt_bytes: int = int(os.getenv("PASSWORD_SALT_BYTES", "16"))
    # Resolve the email domain over DNS when validating addresses
    email_check_deliverability: bool = _as_bool(os.getenv("EMAIL_CHECK_DELIVERABILITY", "false"))
    cors_allow_origins: List[str] = field(
        default_factory=lambda: _as_list(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    )
