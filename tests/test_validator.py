# tests/test_validator.py

import pytest
from signup.state import SignupForm
from signup.validator import SignupField, SignupValidator, UnknownFieldError


REQUIRED_MESSAGES = {
    "firstName": "*First Name is required",
    "lastName": "*Last Name is required",
    "username": "*Username is required",
    "email": "*Email is required",
    "password": "*Password is required",
    "phoneCode": "*Phone code is required",
    "phoneNumber": "*Phone number is required",
    "country": "*Country is required",
    "city": "*City is required",
    "pan": "*PAN number is required",
    "aadhar": "*Aadhar number is required",
}

VALID = {
    "firstName": "Khushi",
    "lastName": "Kaushik",
    "username": "khushi13",
    "email": "khushi@gmail.com",
    "password": "abcdef",
    "phoneCode": "+91",
    "phoneNumber": "9999999999",
    "country": "India",
    "city": "Pune",
    "pan": "ABCDE1234F",
    "aadhar": "123456789012",
}


@pytest.fixture
def validator():
    return SignupValidator()


@pytest.mark.parametrize("name", sorted(REQUIRED_MESSAGES))
def test_empty_value_gives_only_required_message(validator, name):
    assert validator.validate_field(name, "") == REQUIRED_MESSAGES[name]


@pytest.mark.parametrize(
    "name", ["firstName", "lastName", "username", "email", "phoneCode", "phoneNumber", "pan", "aadhar"]
)
def test_blank_value_counts_as_empty(validator, name):
    assert validator.validate_field(name, "   ") == REQUIRED_MESSAGES[name]


def test_blank_password_is_a_length_problem_not_missing(validator):
    assert validator.validate_field("password", "   ") == "*Password must be at least 6 characters"


@pytest.mark.parametrize("name", sorted(VALID))
def test_valid_values_pass(validator, name):
    assert validator.validate_field(name, VALID[name]) == ""


def test_email_needs_dot_after_at(validator):
    assert validator.validate_field("email", "a@b") == "*Invalid email address"
    assert validator.validate_field("email", "a@b.com") == ""
    assert validator.validate_field("email", "a b@c.com") == "*Invalid email address"
    assert validator.validate_field("email", "a@@b.com") == "*Invalid email address"


def test_password_length(validator):
    assert validator.validate_field("password", "abcde") == "*Password must be at least 6 characters"
    assert validator.validate_field("password", "abcdef") == ""


def test_pan_format(validator):
    assert validator.validate_field("pan", "ABCDE1234F") == ""
    assert validator.validate_field("pan", "abcde1234f") == "*Invalid PAN format (e.g., ABCDE1234F)"
    assert validator.validate_field("pan", "ABCDE12345") == "*Invalid PAN format (e.g., ABCDE1234F)"
    assert validator.validate_field("pan", "ABCDE1234FG") == "*Invalid PAN format (e.g., ABCDE1234F)"


def test_aadhar_format(validator):
    assert validator.validate_field("aadhar", "123456789012") == ""
    assert validator.validate_field("aadhar", "12345678901") == "*Aadhar must be a 12-digit number"


def test_phone_code_format(validator):
    assert validator.validate_field("phoneCode", "+91") == ""
    assert validator.validate_field("phoneCode", "+1") == ""
    assert validator.validate_field("phoneCode", "91") == "*Phone code must be like +91 or +1"
    assert validator.validate_field("phoneCode", "+12345") == "*Phone code must be like +91 or +1"


def test_phone_number_format(validator):
    assert validator.validate_field("phoneNumber", "1234567") == ""
    assert validator.validate_field("phoneNumber", "123456789012") == ""
    assert validator.validate_field("phoneNumber", "123456") == "*Phone number must be 7-12 digits"
    assert validator.validate_field("phoneNumber", "1234567890123") == "*Phone number must be 7-12 digits"
    assert validator.validate_field("phoneNumber", "12345678\n") == "*Phone number must be 7-12 digits"


def test_accepts_enum_member(validator):
    assert validator.validate_field(SignupField.EMAIL, "") == "*Email is required"


def test_unknown_field_raises(validator):
    with pytest.raises(UnknownFieldError):
        validator.validate_field("nickname", "x")

    with pytest.raises(KeyError):
        validator.validate_field("showPassword", "x")


def test_validate_form_all_empty_reports_every_field(validator):
    errors = validator.validate_form(SignupForm())

    assert errors == REQUIRED_MESSAGES
    assert len(errors) == 11
    assert "showPassword" not in errors
    assert validator.is_form_valid(SignupForm()) is False


def test_validate_form_only_keeps_failures(validator):
    form = SignupForm.model_validate({**VALID, "pan": "abcde1234f"})

    assert validator.validate_form(form) == {"pan": "*Invalid PAN format (e.g., ABCDE1234F)"}


def test_validate_form_valid(validator):
    form = SignupForm.model_validate(VALID)

    assert validator.validate_form(form) == {}
    assert validator.is_form_valid(form) is True


def test_submit_enabled_ignores_show_password():
    form = SignupForm.model_validate(VALID)

    assert form.show_password is False
    assert SignupValidator.is_submit_enabled(form, {}) is True
    assert SignupValidator.is_submit_enabled(form, {"email": ""}) is True


def test_submit_disabled_when_any_error_or_missing_value():
    form = SignupForm.model_validate(VALID)

    assert SignupValidator.is_submit_enabled(form, {"email": "*Invalid email address"}) is False
    assert SignupValidator.is_submit_enabled(SignupForm(), {}) is False
    assert SignupValidator.is_submit_enabled(form.with_value("city", ""), {}) is False
