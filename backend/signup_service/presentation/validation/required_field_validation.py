from typing import Any, Mapping, Optional

from signup_service.presentation.errors import MissingParamsError
from signup_service.presentation.validation.validation import Validation


class RequiredFieldValidation(Validation):
    def __init__(self, field_name: str) -> None:
        self._field_name = field_name

    def validate(self, input: Mapping[str, Any]) -> Optional[Exception]:
        # Empty strings and other falsy values count as missing
        if not input.get(self._field_name):
            return MissingParamsError(self._field_name)
        return None
