import pytest

from src.core.exceptions import FieldValidationException
from src.core.validators import is_blank, validate_fields


@pytest.mark.parametrize("value, expected", [
    (None, True),
    ("", True),
    ("   ", True),
    ("a", False),
    (0, False),
    (False, False),
])
def test_is_blank(value, expected):
    assert is_blank(value) is expected

def test_validate_fields_lists_missing_fields():
    with pytest.raises(FieldValidationException) as exc_info:
        validate_fields({"street": "Main", "city": None, "zipCode": " "})

    assert exc_info.value.fields == ["city", "zipCode"]
    assert "city" in exc_info.value.message
    assert "zipCode" in exc_info.value.message

def test_validate_fields_accepts_complete_map():
    validate_fields({"street": "Main", "number": "1"})

def test_validate_fields_not_required_skips_checks():
    validate_fields({"street": None}, required=False)
