import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from argwright.exceptions import RegistrationError, ValidationFailedError
from argwright.parser import ArgumentRegistry
from argwright.validators import RangeValidator


def test_range_validator_accepts_valid_numbers():
    validator = RangeValidator(1, 10)
    for valid in ["1", "5", "10", "0x0a", "2.5"]:
        validator.validate(Document(valid))


@pytest.mark.parametrize("invalid", ["0", "11", "10.5", "hello", "-1", ""])
def test_range_validator_rejects_invalid(invalid):
    validator = RangeValidator(1, 10)
    with pytest.raises(ValidationError):
        validator.validate(Document(invalid))


def test_range_validator_check_returns_no_captures():
    assert RangeValidator(1, 10).check(3) == {}
    assert RangeValidator(0.5, 1.5).check(1.5) == {}


def test_range_validator_open_bounds():
    RangeValidator(minimum=0).check(10**9)
    RangeValidator(maximum=0).check(-(10**9))
    with pytest.raises(ValidationError) as excinfo:
        RangeValidator(minimum=0).check(-1)
    assert "no less than 0" in excinfo.value.message
    with pytest.raises(ValidationError) as excinfo:
        RangeValidator(maximum=5).check(6)
    assert "no greater than 5" in excinfo.value.message


def test_range_validator_message():
    with pytest.raises(ValidationError) as excinfo:
        RangeValidator(1, 10).check(11)
    assert excinfo.value.message == (
        "Value 11 is out of range. Enter a number between 1 and 10."
    )


def test_range_validator_rejects_non_numbers():
    with pytest.raises(ValidationError):
        RangeValidator(0, 1).check(True)
    with pytest.raises(ValidationError):
        RangeValidator(0, 1).check("1")


def test_range_validator_registration_errors():
    with pytest.raises(RegistrationError):
        RangeValidator()
    with pytest.raises(RegistrationError):
        RangeValidator(5, 1)


def test_range_validator_describe():
    assert RangeValidator(1, 20).describe() == "range: 1..20"
    assert RangeValidator(minimum=1).describe() == "range: 1.."
    assert RangeValidator(maximum=2.5).describe() == "range: ..2.5"
    assert repr(RangeValidator(1, 20)) == "RangeValidator(1, 20)"


def test_range_validator_rejects_nan():
    with pytest.raises(ValidationError):
        RangeValidator(0, 1).check(float("nan"))
    with pytest.raises(ValidationError):
        RangeValidator(minimum=0).validate(Document("nan"))


@pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-inf"])
def test_float_range_rejects_non_finite_values(text):
    registry = ArgumentRegistry()
    registry.named("ratio", type=float).range(0, 1)
    with pytest.raises(ValidationFailedError):
        registry.parse(["--ratio", text])
