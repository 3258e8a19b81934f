import pytest

from vouch import validate_file_name
from vouch.system import RESERVED_NAMES


def test_reserved_name_scenario():
    result = validate_file_name("CON.txt")
    assert not result.is_valid
    assert result.error_message == "File name uses reserved Windows name: CON"


def test_plain_name_is_trimmed():
    result = validate_file_name("  document.pdf ")
    assert result.is_valid
    assert result.normalized_value == "document.pdf"


@pytest.mark.parametrize("name", ["con", "Lpt9.log", "nul.tar.gz", "COM1"])
def test_reserved_names_case_insensitive(name):
    assert "reserved Windows name" in validate_file_name(name).error_message


def test_names_merely_containing_reserved_words_are_fine():
    assert validate_file_name("COM10.txt").is_valid
    assert validate_file_name("console.log").is_valid


@pytest.mark.parametrize(
    "value,message",
    [
        (None, "File name is required"),
        ("   ", "File name cannot be empty or only whitespace"),
        ("my:file.txt", "File name contains forbidden character: :"),
        ("a<b", "File name contains forbidden character: <"),
        ("dir/file", "File name contains forbidden character: /"),
        ("file\x01.txt", "File name contains control characters"),
        ("file.", "File name cannot end with a space or dot"),
        ("a" * 256, "File name too long (max 255 characters)"),
    ],
)
def test_failures(value, message):
    assert validate_file_name(value).error_message == message


def test_forbidden_character_checked_before_reserved_name():
    assert validate_file_name("CON:").error_message == "File name contains forbidden character: :"


def test_length_config():
    assert validate_file_name("abcdef.txt", {"max_length": 5}).error_message == "File name too long (max 5 characters)"
    assert validate_file_name("a.b", {"minLength": 4}).error_message == "File name too short (min 4 characters)"


def test_accepted_extensions():
    cfg = {"accepted_file_extensions": ["pdf", ".DOC"]}
    assert validate_file_name("report.PDF", cfg).is_valid
    assert validate_file_name("report.doc", cfg).is_valid
    assert (
        validate_file_name("report.txt", cfg).error_message
        == "File extension not allowed. Accepted: .pdf, .doc"
    )
    assert not validate_file_name("README", cfg).is_valid


def test_reserved_names_table():
    assert len(RESERVED_NAMES) == 22
    assert isinstance(RESERVED_NAMES, frozenset)
