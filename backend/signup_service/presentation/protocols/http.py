from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class HttpRequest:
    body: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None
