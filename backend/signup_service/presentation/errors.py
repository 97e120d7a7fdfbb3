class PresentationError(Exception):
    """Base for errors reported back to the client.

    Instances are compared by type and ``param_name`` so responses can be
    checked against a freshly built error.
    """

    def __init__(self, message: str, param_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.param_name = param_name

    @property
    def name(self) -> str:
        return type(self).__name__

    def __setattr__(self, key, value):
        if key in ("message", "param_name") and key in self.__dict__:
            raise AttributeError(f"{self.name}.{key} is read-only")
        super().__setattr__(key, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.param_name == other.param_name and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.param_name, self.message))

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


class MissingParamsError(PresentationError):
    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}", param_name)


class InvalidParamsError(PresentationError):
    def __init__(self, param_name: str) -> None:
        super().__init__(f"Invalid param: {param_name}", param_name)


class ServerError(PresentationError):
    def __init__(self) -> None:
        super().__init__("Internal server error")
