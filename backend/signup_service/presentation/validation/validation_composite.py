from typing import Any, List, Mapping, Optional, Sequence

from signup_service.presentation.validation.validation import Validation


class ValidationComposite(Validation):
    """Runs validations in order and returns the first error found.

    Later validations are skipped once one fails, so the order of
    ``validations`` decides which error a malformed input reports.
    """

    def __init__(self, validations: Sequence[Validation]) -> None:
        self._validations: List[Validation] = list(validations)

    def validate(self, input: Mapping[str, Any]) -> Optional[Exception]:
        for validation in self._validations:
            error = validation.validate(input)
            if error is not None:
                return error
        return None
