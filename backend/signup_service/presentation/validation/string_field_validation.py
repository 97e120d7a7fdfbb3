from typing import Any, Mapping, Optional

from signup_service.presentation.errors import InvalidParamsError
from signup_service.presentation.validation.validation import Validation


class StringFieldValidation(Validation):
    """Fails when the field holds anything other than a ``str``."""

    def __init__(self, field_name: str) -> None:
        self._field_name = field_name

    def validate(self, input: Mapping[str, Any]) -> Optional[Exception]:
        if not isinstance(input.get(self._field_name), str):
            return InvalidParamsError(self._field_name)
        return None
