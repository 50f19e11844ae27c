from typing import Any

from decifix.exceptions.base import DecifixValueError

"""
Exceptions defined here are raised by the literal construction helpers.
"""


class LiteralError(DecifixValueError):
    """
    Exception raised inside literal construction helpers.
    """


class InvalidLiteral(LiteralError):
    """
    Raised when a token is not a decimal literal with an optional integer kind suffix.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(message=f"Invalid fixed-point literal {token!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.token,)


class InvalidConstantName(LiteralError):
    """
    Raised when a generated constant would not be a valid Python identifier, or would shadow a name
    imported by the generated module.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(message=f"{name!r} is not a valid constant name")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.name,)
