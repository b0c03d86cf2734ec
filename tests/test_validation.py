import pytest

from cryptoh.errors import CryptohError, InvalidInputError
from cryptoh.validation import validate_input


@pytest.mark.parametrize("value", ["a", " a ", "\thello\n", "0"])
def test_accepts_non_blank_strings(value):
    assert validate_input(value, "text") is None


@pytest.mark.parametrize("value", ["", " ", "   ", "\t\n", "\r\n  "])
def test_rejects_empty_and_whitespace(value):
    with pytest.raises(InvalidInputError, match="must not be empty or whitespace"):
        validate_input(value, "text")


@pytest.mark.parametrize("value", [None, 123, 1.5, b"bytes", ["a"], True])
def test_rejects_non_strings_without_coercion(value):
    with pytest.raises(InvalidInputError, match="must be a string"):
        validate_input(value, "text")


def test_message_names_the_field():
    with pytest.raises(InvalidInputError) as excinfo:
        validate_input("  ", " hash ")
    assert str(excinfo.value) == "Input hash must not be empty or whitespace."


def test_message_without_field_name():
    with pytest.raises(InvalidInputError) as excinfo:
        validate_input("")
    assert str(excinfo.value) == "Input must not be empty or whitespace."


def test_error_hierarchy():
    with pytest.raises(ValueError):
        validate_input("", "text")
    with pytest.raises(CryptohError):
        validate_input(42, "text")


@pytest.mark.parametrize("value", ["abc\udcff", "\ud800", "x\udc80y"])
def test_rejects_lone_surrogates(value):
    with pytest.raises(InvalidInputError, match="Input text is not valid UTF-8"):
        validate_input(value, "text")
