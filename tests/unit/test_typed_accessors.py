"""Tests for typed accessors and value coercions."""

import math

import pytest

from csvcursor.core.tokenizer import (
    EmptyFieldError,
    FieldType,
    InvalidBooleanError,
    NumericFormatError,
    Tokenizer,
    TokenizerError,
    parse_bool,
    parse_float,
    parse_integer,
)
from csvcursor.core.tokenizer.cursor import ACCESSORS


class TestIntegerAccessors:
    """Tests for get_short, get_int and get_long."""

    def test_int_with_surrounding_whitespace(self) -> None:
        assert Tokenizer(" 42 ").get_int() == 42

    def test_int_malformed(self) -> None:
        """Test malformed number carries the offending text."""
        with pytest.raises(NumericFormatError) as exc_info:
            Tokenizer("4x").get_int()
        assert exc_info.value.text == "4x"
        assert exc_info.value.target == "int"

    def test_numeric_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Tokenizer("abc").get_long()

    def test_signed_values(self) -> None:
        tok = Tokenizer("-7,+8")
        assert tok.get_int() == -7
        assert tok.get_int() == 8

    def test_int_overflow(self) -> None:
        with pytest.raises(NumericFormatError):
            Tokenizer("2147483648").get_int()

    def test_int_bounds(self) -> None:
        tok = Tokenizer("2147483647,-2147483648")
        assert tok.get_int() == 2**31 - 1
        assert tok.get_int() == -(2**31)

    def test_short_range(self) -> None:
        assert Tokenizer("32767").get_short() == 32767
        with pytest.raises(NumericFormatError):
            Tokenizer("32768").get_short()

    def test_long_range(self) -> None:
        assert Tokenizer("9223372036854775807").get_long() == 2**63 - 1
        with pytest.raises(NumericFormatError):
            Tokenizer("9223372036854775808").get_long()

    def test_underscores_rejected(self) -> None:
        with pytest.raises(NumericFormatError):
            Tokenizer("1_000").get_int()

    def test_decimal_rejected_for_int(self) -> None:
        with pytest.raises(NumericFormatError):
            Tokenizer("1.5").get_int()

    def test_empty_field_before_numeric_check(self) -> None:
        with pytest.raises(EmptyFieldError):
            Tokenizer("   ").get_int()

    def test_quoted_number(self) -> None:
        assert Tokenizer('"12"').get_int() == 12


class TestFloatAccessors:
    """Tests for get_float and get_double."""

    def test_double(self) -> None:
        tok = Tokenizer("1.5,.25,3e-2,-4.")
        assert tok.get_double() == 1.5
        assert tok.get_double() == 0.25
        assert tok.get_double() == pytest.approx(0.03)
        assert tok.get_double() == -4.0

    def test_float_single_precision(self) -> None:
        value = Tokenizer("0.1").get_float()
        assert value != 0.1
        assert value == pytest.approx(0.1)

    def test_float_overflow(self) -> None:
        with pytest.raises(NumericFormatError):
            Tokenizer("1e39").get_float()

    def test_double_overflow(self) -> None:
        with pytest.raises(NumericFormatError):
            Tokenizer("1e400").get_double()

    def test_special_literals(self) -> None:
        tok = Tokenizer("NaN,Infinity,-Infinity")
        assert math.isnan(tok.get_double())
        assert tok.get_double() == math.inf
        assert tok.get_float() == -math.inf

    def test_python_only_syntax_rejected(self) -> None:
        for text in ("inf", "nan", "1_0.5", "0x10"):
            with pytest.raises(NumericFormatError):
                parse_float(text)

    def test_malformed(self) -> None:
        with pytest.raises(NumericFormatError) as exc_info:
            Tokenizer("1.2.3").get_double()
        assert exc_info.value.text == "1.2.3"


class TestBooleanAccessor:
    """Tests for get_bool."""

    def test_true_literals(self) -> None:
        tok = Tokenizer("TRUE,1,True")
        assert tok.get_bool() is True
        assert tok.get_bool() is True
        assert tok.get_bool() is True

    def test_false_literals(self) -> None:
        tok = Tokenizer("false,0,FALSE")
        assert tok.get_bool() is False
        assert tok.get_bool() is False
        assert tok.get_bool() is False

    def test_invalid(self) -> None:
        with pytest.raises(InvalidBooleanError) as exc_info:
            Tokenizer("yes").get_bool()
        assert exc_info.value.text == "yes"
        assert exc_info.value.code == "CSV-BOOL-001"

    def test_invalid_is_tokenizer_error(self) -> None:
        with pytest.raises(TokenizerError):
            parse_bool("2")


class TestStringAndDispatch:
    """Tests for get_string and get."""

    def test_get_string(self) -> None:
        assert Tokenizer('  "hello, world"  ').get_string() == "hello, world"

    def test_get_dispatch(self) -> None:
        tok = Tokenizer("1,2,3,1.5,2.5,text,true")
        values = [
            tok.get(FieldType.SHORT),
            tok.get(FieldType.INT),
            tok.get(FieldType.LONG),
            tok.get(FieldType.FLOAT),
            tok.get(FieldType.DOUBLE),
            tok.get(FieldType.STRING),
            tok.get(FieldType.BOOL),
        ]
        assert values == [1, 2, 3, 1.5, 2.5, "text", True]

    def test_every_field_type_has_accessor(self) -> None:
        for field_type in FieldType:
            assert callable(getattr(Tokenizer("1"), ACCESSORS[field_type]))

    def test_error_position(self) -> None:
        tok = Tokenizer("1,x")
        tok.get_int()
        with pytest.raises(NumericFormatError) as exc_info:
            tok.get_int()
        assert exc_info.value.column == 2


class TestFieldTypeList:
    """Tests for FieldType.parse_list."""

    def test_parse_list(self) -> None:
        assert FieldType.parse_list("int, String ,bool") == [
            FieldType.INT,
            FieldType.STRING,
            FieldType.BOOL,
        ]

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            FieldType.parse_list("int,decimal")


class TestCoercionFunctions:
    """Tests for the coercion helpers directly."""

    def test_parse_integer_default_width(self) -> None:
        assert parse_integer("-12") == -12

    def test_parse_integer_rejects_unicode_digits(self) -> None:
        with pytest.raises(NumericFormatError):
            parse_integer("١٢")
