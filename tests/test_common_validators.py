import pytest

from vouch import (
    validate_age,
    validate_alpha,
    validate_alphanumeric,
    validate_birth_date,
    validate_date,
    validate_email,
    validate_numeric,
    validate_phone,
    validate_text,
    validate_url,
)
from vouch.config import DecimalConfig, ValidationConfig


class TestNumeric:
    """Range and precision rules for numbers."""

    def test_parses_strings_with_thousands_separators(self):
        result = validate_numeric("1,234.5")
        assert result.is_valid
        assert result.normalized_value == 1234.5

    def test_bounds_are_inclusive(self):
        assert validate_numeric(0, {"min": 0}).is_valid
        result = validate_numeric(-0.0001, {"min": 0})
        assert not result.is_valid
        assert result.error_message == "Value must be at least 0"
        assert validate_numeric(100, {"max": 100}).is_valid
        assert validate_numeric(100.5, {"max": 100}).error_message == "Value must be at most 100"

    def test_decimal_place_boundary(self):
        cfg = ValidationConfig(decimals=DecimalConfig(max=1))
        assert validate_numeric(1.2, cfg).is_valid
        result = validate_numeric(1.23, cfg)
        assert result.error_message == "Must have at most 1 decimal places"

    def test_minimum_decimal_places(self):
        result = validate_numeric(1.5, {"decimals": {"min": 2}})
        assert result.error_message == "Must have at least 2 decimal places"

    def test_exponent_notation_counts_decimals(self):
        assert not validate_numeric(1e-7, {"decimals": {"max": 6}}).is_valid

    @pytest.mark.parametrize(
        "value,message",
        [
            (None, "Numeric value is required"),
            ("", "Numeric value is required"),
            ("abc", "Invalid numeric value"),
            ("12abc", "Invalid numeric value"),
            (True, "Invalid numeric value"),
            ("Infinity", "Value must be a finite number"),
        ],
    )
    def test_failures(self, value, message):
        result = validate_numeric(value)
        assert not result.is_valid
        assert result.error_message == message


class TestText:

    def test_trims(self):
        assert validate_text("  Hello  ").normalized_value == "Hello"

    def test_length_rules(self):
        assert validate_text("abcde", {"fixLength": 5}).is_valid
        assert validate_text("abcd", {"fix_length": 5}).error_message == "Text must be exactly 5 characters"
        assert validate_text("ab", {"min_length": 3}).error_message == "Text must be at least 3 characters"
        assert validate_text("abcd", {"max_length": 3}).error_message == "Text must be at most 3 characters"

    def test_special_chars_only_restricted_when_explicitly_false(self):
        assert validate_text("a-b!").is_valid
        result = validate_text("a-b!", {"allow_special_chars": False})
        assert result.error_message == "Text can only contain letters, numbers, and spaces"

    def test_alpha(self):
        assert validate_alpha("Jane Doe").is_valid
        assert validate_alpha("R2D2").error_message == "Text can only contain letters and spaces"
        assert validate_alpha("Jane", {"max_length": 3}).error_message == "Text must be at most 3 characters"

    def test_alphanumeric(self):
        assert validate_alphanumeric("abc 123").is_valid
        assert not validate_alphanumeric("abc-123").is_valid
        # even an explicit True is overridden
        assert not validate_alphanumeric("abc-123", {"allow_special_chars": True}).is_valid

    def test_numbers_are_coerced_to_text(self):
        assert validate_text(123.0).normalized_value == "123"


class TestEmail:

    def test_normalizes_case_and_whitespace(self):
        result = validate_email("  User@Example.COM ")
        assert result.is_valid
        assert result.normalized_value == "user@example.com"

    def test_idempotent(self):
        first = validate_email("a@b.com")
        assert first.normalized_value == "a@b.com"
        assert validate_email(first.normalized_value).normalized_value == "a@b.com"

    @pytest.mark.parametrize(
        "value,message",
        [
            ("userexample.com", "Invalid email format: missing @ symbol"),
            ("user@@example.com", "Invalid email format"),
            ("user@-example.com", "Invalid email format"),
            ("user@localhost", "Invalid email domain: missing top-level domain"),
            ("a" * 65 + "@example.com", "Email local part too long (max 64 characters)"),
            ("a" * 250 + "@x.com", "Email address is too long (max 254 characters)"),
        ],
    )
    def test_failures(self, value, message):
        assert validate_email(value).error_message == message


class TestUrl:

    @pytest.mark.parametrize(
        "value",
        [
            "https://example.com/path?query=value",
            "example.com",
            "http://localhost:8080/api",
            "http://192.168.0.1",
            "ftp://files.example.org/pub",
        ],
    )
    def test_valid(self, value):
        result = validate_url(value)
        assert result.is_valid
        assert result.normalized_value == value

    @pytest.mark.parametrize(
        "value",
        [
            "http://example",  # no TLD
            "not a url",
            "https://example.com:99999",  # port out of range
            "https://exa mple.com",
        ],
    )
    def test_invalid(self, value):
        assert validate_url(value).error_message == "Invalid URL format"

    def test_too_long(self):
        url = "https://example.com/" + "a" * 2048
        assert validate_url(url).error_message == "URL is too long (max 2048 characters)"


class TestPhone:

    def test_strips_separators(self):
        result = validate_phone("+33-1-23-45-67-89")
        assert result.is_valid
        assert result.normalized_value == "+33123456789"
        assert validate_phone("+1 (555) [123].4567").normalized_value == "+15551234567"

    @pytest.mark.parametrize(
        "value,message",
        [
            ("555-1234", "Phone number must start with + for international format"),
            ("+0 555 1234", "Invalid phone number format. Expected: + followed by 1-15 digits"),
            ("+1234567890123456", "Invalid phone number format. Expected: + followed by 1-15 digits"),
            ("+12 abc 3456", "Invalid phone number format. Expected: + followed by 1-15 digits"),
            ("+123456", "Phone number too short (minimum 7 digits)"),
        ],
    )
    def test_failures(self, value, message):
        assert validate_phone(value).error_message == message


class TestDates:

    REF = {"reference_date": "2024-06-15"}

    def test_date_normalizes_to_iso(self):
        assert validate_date("2024-01-15").normalized_value == "2024-01-15"
        assert validate_date("2024-01-15T10:30:00").normalized_value == "2024-01-15T10:30:00"

    def test_rejects_impossible_dates(self):
        assert validate_date("2023-02-30").error_message == "Invalid date format"

    def test_date_range(self):
        cfg = {"min_date": "2024-01-01", "max_date": "2024-12-31"}
        assert validate_date("2024-01-01", cfg).is_valid
        assert validate_date("2023-12-31", cfg).error_message == "Date must be on or after 2024-01-01"
        assert validate_date("2025-01-01", cfg).error_message == "Date must be on or before 2024-12-31"

    def test_birth_date(self):
        assert validate_birth_date("1990-05-20", self.REF).is_valid
        assert validate_birth_date("2030-01-01", self.REF).error_message == "Birth date cannot be in the future"
        assert (
            validate_birth_date("1850-01-01", self.REF).error_message
            == "Birth date is too far in the past (max 130 years)"
        )

    def test_age_has_birthday_occurred_rule(self):
        assert validate_age("2000-06-15", self.REF).normalized_value == 24
        assert validate_age("2000-06-16", self.REF).normalized_value == 23
        assert validate_age("2000-07-01", self.REF).normalized_value == 23

    def test_age_prefers_config_birth_date(self):
        cfg = {**self.REF, "birthDate": "2004-01-01"}
        assert validate_age(None, cfg).normalized_value == 20

    def test_age_bounds(self):
        assert validate_age("2010-01-01", {**self.REF, "min": 18}).error_message == "Age must be at least 18"
        assert validate_age("1950-01-01", {**self.REF, "max": 65}).error_message == "Age must be at most 65"
        assert validate_age("1800-01-01", self.REF).error_message == "Invalid age (exceeds 130 years)"
        assert validate_age("2025-01-01", self.REF).error_message == "Birth date cannot be in the future"

    def test_age_requires_birth_date(self):
        assert validate_age(None).error_message == "Birth date is required to calculate age"
        assert validate_age("soon").error_message == "Invalid birth date format"
