from typing import Any, Mapping, Optional

from signup_service.presentation.errors import InvalidParamsError
from signup_service.presentation.protocols.email_validator import EmailValidator
from signup_service.presentation.validation.validation import Validation


class EmailValidation(Validation):
    def __init__(self, field_name: str, email_validator: EmailValidator) -> None:
        self._field_name = field_name
        self._email_validator = email_validator

    def validate(self, input: Mapping[str, Any]) -> Optional[Exception]:
        # Validator failures propagate; the controller turns them into a 500
        if not self._email_validator.is_valid(input.get(self._field_name)):
            return InvalidParamsError(self._field_name)
        return None
