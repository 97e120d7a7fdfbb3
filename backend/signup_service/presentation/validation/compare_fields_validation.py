from typing import Any, Mapping, Optional

from signup_service.presentation.errors import InvalidParamsError
from signup_service.presentation.validation.validation import Validation


class CompareFieldsValidation(Validation):
    """Fails on ``field_to_compare_name`` when it differs from ``field_name``."""

    def __init__(self, field_name: str, field_to_compare_name: str) -> None:
        self._field_name = field_name
        self._field_to_compare_name = field_to_compare_name

    def validate(self, input: Mapping[str, Any]) -> Optional[Exception]:
        if input.get(self._field_name) != input.get(self._field_to_compare_name):
            return InvalidParamsError(self._field_to_compare_name)
        return None
