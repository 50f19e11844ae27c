from typing import Any

from decifix.exceptions.base import DecifixTypeError, DecifixValueError

"""
Exceptions defined here are raised by the `FixedPoint` value type and the integer kinds backing it.
"""


class FixedPointError(DecifixValueError):
    """
    Exception raised by fixed-point value operations.
    """


class FixedPointParseError(FixedPointError):
    """
    Raised when a string cannot be parsed into a fixed-point value.

    Malformed input and values that do not fit the storage kind are deliberately reported with the
    same exception and message.
    """

    def __init__(self) -> None:
        super().__init__(message="Invalid fixed-point string")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, ()


class FixedPointRangeError(FixedPointError):
    """
    Raised when a floating point value cannot be represented by the storage kind after scaling.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message=message)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.message,)


class IntegerOverflow(FixedPointError):
    """
    Raised when a stored integer falls outside the bounds of its integer kind.
    """

    def __init__(self, value: int, kind: str) -> None:
        self.value = value
        self.kind = kind
        super().__init__(message=f"{value} outside range of {kind} values")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.value, self.kind)


class PrecisionMismatch(DecifixTypeError):
    """
    Raised when an operation combines fixed-point values of different types.
    """

    def __init__(self, left: str, right: str) -> None:
        self.left = left
        self.right = right
        super().__init__(message=f"Cannot combine {left} with {right}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.left, self.right)


class UnsupportedConversion(DecifixTypeError):
    """
    Raised when a storage kind cannot be converted losslessly into the intermediate type.
    """

    def __init__(self, kind: str, target: str) -> None:
        self.kind = kind
        self.target = target
        super().__init__(message=f"{kind} storage cannot be converted into {target}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.kind, self.target)
