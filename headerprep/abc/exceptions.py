"""abstract module for exceptions"""


class HeaderprepException(Exception):
    """Base class for headerprep related exceptions."""

    def __init__(self, message: str, *args) -> None:
        self.message = message
        super().__init__(message, *args)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HeaderprepException):
            return self.args == other.args
        return NotImplemented

    __hash__ = Exception.__hash__
