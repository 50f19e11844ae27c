class DecifixError(Exception):
    """
    Parent of every exception raised by decifix.

    Parsing, range and literal failures each have their own subclass, so callers can handle the
    specific failure first and fall back to `DecifixError` for the rest:

    ```
    try:
        price = FixedPoint[U32, 2].from_str(text)
    except FixedPointParseError:
        price = FixedPoint[U32, 2]()
    except DecifixError as exc:
        raise InvalidOrder(exc.message) from exc
    ```

    The human-readable description, when one was given, is kept on `.message`.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class DecifixValueError(DecifixError): ...


class DecifixTypeError(DecifixError): ...
