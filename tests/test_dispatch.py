import pytest

from vouch import InputType, ValidationResult, supported_types, validate_input
from vouch.dispatch import VALIDATORS

CASES = [
    (InputType.numeric, "42", 42.0),
    (InputType.text, " hi ", "hi"),
    (InputType.email, "A@B.com", "a@b.com"),
    (InputType.url, "https://example.com", "https://example.com"),
    (InputType.phone, "+1 555 123 4567", "+15551234567"),
    (InputType.iban, "GB82 WEST 1234 5698 7654 32", "GB82WEST12345698765432"),
    (InputType.isin, "US0378331005", "US0378331005"),
    (InputType.gln, "0614141000012", "0614141000012"),
    (InputType.gtin, "5901234123457", "5901234123457"),
    (InputType.date, "2024-01-15", "2024-01-15"),
    (InputType.file_name, "notes.md", "notes.md"),
]


@pytest.mark.parametrize("input_type,value,normalized", CASES)
def test_routes_each_tag(input_type, value, normalized):
    result = validate_input(value, input_type)
    assert result.is_valid
    assert result.normalized_value == normalized


def test_age_routes_with_config():
    result = validate_input("2000-01-01", InputType.age, {"reference_date": "2024-06-15"})
    assert result.normalized_value == 24


def test_accepts_string_tags():
    assert validate_input("US0378331005", "isin").is_valid


def test_every_tag_is_registered():
    assert set(VALIDATORS) == set(InputType)
    assert supported_types() == [t.value for t in VALIDATORS]


def test_forwards_result_verbatim():
    direct = VALIDATORS[InputType.iban]("GB82WEST12345698765433")
    assert validate_input("GB82WEST12345698765433", InputType.iban) == direct


def test_unknown_type():
    result = validate_input("x", "file_name")
    assert result == ValidationResult(False, "Unknown input type: file_name")


def test_file_name_tag_is_camel_case_on_the_wire():
    result = validate_input("CON.txt", "fileName")
    assert result == ValidationResult(False, "File name uses reserved Windows name: CON")
    assert "fileName" in supported_types()


def test_unknown_type_honours_custom_message():
    result = validate_input("x", "nope", {"customErrorMessage": "Unsupported field"})
    assert result.error_message == "Unsupported field"


def test_unknown_type_with_malformed_config():
    assert validate_input("x", "nope", {"bogus": 1}).error_message == "Unknown input type: nope"
