from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class Validation(ABC):
    """Single rule over request input. Reports at most one error, never raises it."""

    @abstractmethod
    def validate(self, input: Mapping[str, Any]) -> Optional[Exception]:
        raise NotImplementedError
