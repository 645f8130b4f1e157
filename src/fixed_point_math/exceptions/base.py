class FixedPointError(Exception):
    """
    Base exception used as the parent class for all exceptions raised by this package.

    Calling code using the host contract should catch specific faults before `FixedPointError`, e.g.:

    ```
    try:
        fixed_point_math.host_i128.fixed_mul_floor(x, y, denominator)
    except DivisionByZero:
        ... # handle a specific fault
    except FixedPointError:
        ... # handle non-specific fixed_point_math exception
    ```

    Operands outside the range of the integer type are rejected by pydantic, and raise
    `pydantic.ValidationError` instead.

    An optional string-formatted message may be attached to the exception and retrieved by accessing
    the `.message` attribute.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class FixedPointValueError(FixedPointError):
    """
    Raised for invalid names or settings, e.g. an unknown integer type.
    """
