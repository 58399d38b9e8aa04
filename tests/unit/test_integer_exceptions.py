import pickle

import pytest

from safeint.integers.exceptions import (
    DivisionByZeroError,
    FloatingPointNotSupportedError,
    InconsistentSizeError,
    IntegerOverflowError,
    IntegerUnderflowError,
    InvalidSizeError,
    NegativeUnsignedError,
    SafeIntegerError,
    TypeNotSupportedError,
    UnconstructableIntegerError,
)


class TestMessages:
    def test_type_not_supported(self) -> None:
        assert str(TypeNotSupportedError()) == "Handling this type is not supported."

    def test_floating_point(self) -> None:
        assert str(FloatingPointNotSupportedError()) == "This library does not support decimals."

    def test_invalid_size(self) -> None:
        assert str(InvalidSizeError(8, 9)) == "Invalid size, expected size: 8, actual size: 9"

    def test_negative_unsigned(self) -> None:
        assert str(NegativeUnsignedError()) == "Cannot construct negative unsigned integers"

    def test_unconstructable(self) -> None:
        assert str(UnconstructableIntegerError(12, False, "255")) == (
            "Could not construct Integer of size: 12, signed: False, value: 255"
        )

    def test_overflow(self) -> None:
        assert str(IntegerOverflowError(8, "256", 9)) == (
            "Overflow error: capacity 8, number: 256, required size: 9"
        )

    def test_underflow(self) -> None:
        assert str(IntegerUnderflowError(8, "-129", 9)) == (
            "Underflow error: capacity 8, number: -129, required size: 9"
        )

    def test_inconsistent_size(self) -> None:
        assert str(InconsistentSizeError(16, 8)) == (
            "Cannot perform operations on different sized numbers. "
            "required size: 16, input size: 8"
        )

    def test_division_by_zero(self) -> None:
        assert str(DivisionByZeroError()) == "Division by zero."


class TestDiagnosticFields:
    def test_invalid_size_fields(self) -> None:
        error = InvalidSizeError(16, 17)
        assert error.expected == 16
        assert error.actual == 17

    def test_unconstructable_fields(self) -> None:
        error = UnconstructableIntegerError(24, True, "-3")
        assert error.width == 24
        assert error.signed is True
        assert error.value == "-3"


class TestValueSemantics:
    def test_equal_when_same_class_and_fields(self) -> None:
        assert InvalidSizeError(8, 9) == InvalidSizeError(8, 9)
        assert NegativeUnsignedError() == NegativeUnsignedError()

    def test_not_equal_when_fields_differ(self) -> None:
        assert InvalidSizeError(8, 9) != InvalidSizeError(8, 10)

    def test_not_equal_across_classes(self) -> None:
        assert NegativeUnsignedError() != FloatingPointNotSupportedError()
        assert IntegerOverflowError(8, "256", 9) != IntegerUnderflowError(8, "256", 9)

    def test_hash_matches_equality(self) -> None:
        assert hash(InvalidSizeError(8, 9)) == hash(InvalidSizeError(8, 9))
        assert len({NegativeUnsignedError(), NegativeUnsignedError()}) == 1

    def test_survives_pickling(self) -> None:
        error = UnconstructableIntegerError(12, False, "255")
        assert pickle.loads(pickle.dumps(error)) == error


class TestHierarchy:
    def test_all_errors_share_base(self) -> None:
        for error in (
            TypeNotSupportedError(),
            FloatingPointNotSupportedError(),
            InvalidSizeError(8, 9),
            NegativeUnsignedError(),
            UnconstructableIntegerError(12, False, "1"),
            IntegerOverflowError(8, "256", 9),
            IntegerUnderflowError(8, "-129", 9),
            InconsistentSizeError(16, 8),
            DivisionByZeroError(),
        ):
            assert isinstance(error, SafeIntegerError)

    def test_can_be_raised_and_caught_by_base(self) -> None:
        with pytest.raises(SafeIntegerError):
            raise InvalidSizeError(8, 9)
