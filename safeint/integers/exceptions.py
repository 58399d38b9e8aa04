"""Closed error taxonomy for integer construction and arithmetic.

Errors are returned inside ``Err`` rather than raised, so they carry their
diagnostic fields as ``args`` and compare by value. ``loudly_extract`` is
the one place that raises them.
"""


class SafeIntegerError(Exception):
    """Base exception for all sized-integer errors."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class TypeNotSupportedError(SafeIntegerError):
    """Raised when the input is not a string, a native number or a big integer."""

    def __str__(self) -> str:
        return "Handling this type is not supported."


class FloatingPointNotSupportedError(SafeIntegerError):
    """Raised when a non-integral number or a decimal string is supplied."""

    def __str__(self) -> str:
        return "This library does not support decimals."


class InvalidSizeError(SafeIntegerError):
    """Raised when a value needs more bits than the requested width."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Invalid size, expected size: {self.expected}, actual size: {self.actual}"


class NegativeUnsignedError(SafeIntegerError):
    """Raised when a negative value is supplied to an unsigned constructor."""

    def __str__(self) -> str:
        return "Cannot construct negative unsigned integers"


class UnconstructableIntegerError(SafeIntegerError):
    """Raised when a (width, signed) pair has no integer variant."""

    def __init__(self, width: int, signed: bool, value: str) -> None:
        super().__init__(width, signed, value)
        self.width = width
        self.signed = signed
        self.value = value

    def __str__(self) -> str:
        return (
            f"Could not construct Integer of size: {self.width}, "
            f"signed: {self.signed}, value: {self.value}"
        )


# Arithmetic errors. Arithmetic on sized integers is not implemented here.


class IntegerOverflowError(SafeIntegerError):
    """Raised when a result exceeds the capacity of its width."""

    def __init__(self, capacity: int, number: str, required_size: int) -> None:
        super().__init__(capacity, number, required_size)
        self.capacity = capacity
        self.number = number
        self.required_size = required_size

    def __str__(self) -> str:
        return (
            f"Overflow error: capacity {self.capacity}, number: {self.number}, "
            f"required size: {self.required_size}"
        )


class IntegerUnderflowError(SafeIntegerError):
    """Raised when a result falls below the range of its width."""

    def __init__(self, capacity: int, number: str, required_size: int) -> None:
        super().__init__(capacity, number, required_size)
        self.capacity = capacity
        self.number = number
        self.required_size = required_size

    def __str__(self) -> str:
        return (
            f"Underflow error: capacity {self.capacity}, number: {self.number}, "
            f"required size: {self.required_size}"
        )


class InconsistentSizeError(SafeIntegerError):
    """Raised when operands of different widths are combined."""

    def __init__(self, required_size: int, input_size: int) -> None:
        super().__init__(required_size, input_size)
        self.required_size = required_size
        self.input_size = input_size

    def __str__(self) -> str:
        return (
            "Cannot perform operations on different sized numbers. "
            f"required size: {self.required_size}, input size: {self.input_size}"
        )


class DivisionByZeroError(SafeIntegerError):
    """Raised when dividing by a zero-valued integer."""

    def __str__(self) -> str:
        return "Division by zero."


ErrorKind = (
    TypeNotSupportedError
    | FloatingPointNotSupportedError
    | InvalidSizeError
    | NegativeUnsignedError
    | UnconstructableIntegerError
    | IntegerOverflowError
    | IntegerUnderflowError
    | InconsistentSizeError
    | DivisionByZeroError
)
