import re
from enum import Enum
from typing import Callable, Dict, Literal, Union

from signup.state import SignupForm, SignupState


class SignupField(str, Enum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    PHONE_CODE = "phoneCode"
    PHONE_NUMBER = "phoneNumber"
    COUNTRY = "country"
    CITY = "city"
    PAN = "pan"
    AADHAR = "aadhar"


class UnknownFieldError(KeyError):
    pass


EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PAN_RE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")
PHONE_CODE_RE = re.compile(r"\+[0-9]{1,4}")
PHONE_NUMBER_RE = re.compile(r"[0-9]{7,12}")
AADHAR_RE = re.compile(r"[0-9]{12}")

MIN_PASSWORD_LENGTH = 6


def _required(message: str) -> Callable[[str], str]:
    def rule(value: str) -> str:
        return message if not value.strip() else ""

    return rule


def _selected(message: str) -> Callable[[str], str]:
    def rule(value: str) -> str:
        return message if not value else ""

    return rule


def _patterned(required: str, pattern: "re.Pattern[str]", invalid: str) -> Callable[[str], str]:
    def rule(value: str) -> str:
        if not value.strip():
            return required
        if pattern.fullmatch(value) is None:
            return invalid
        return ""

    return rule


def _password(value: str) -> str:
    if not value:
        return "*Password is required"
    if len(value) < MIN_PASSWORD_LENGTH:
        return f"*Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return ""


RULES: Dict[SignupField, Callable[[str], str]] = {
    SignupField.FIRST_NAME: _required("*First Name is required"),
    SignupField.LAST_NAME: _required("*Last Name is required"),
    SignupField.USERNAME: _required("*Username is required"),
    SignupField.EMAIL: _patterned("*Email is required", EMAIL_RE, "*Invalid email address"),
    SignupField.PASSWORD: _password,
    SignupField.PHONE_CODE: _patterned(
        "*Phone code is required", PHONE_CODE_RE, "*Phone code must be like +91 or +1"
    ),
    SignupField.PHONE_NUMBER: _patterned(
        "*Phone number is required", PHONE_NUMBER_RE, "*Phone number must be 7-12 digits"
    ),
    SignupField.COUNTRY: _selected("*Country is required"),
    SignupField.CITY: _selected("*City is required"),
    SignupField.PAN: _patterned(
        "*PAN number is required", PAN_RE, "*Invalid PAN format (e.g., ABCDE1234F)"
    ),
    SignupField.AADHAR: _patterned(
        "*Aadhar number is required", AADHAR_RE, "*Aadhar must be a 12-digit number"
    ),
}

_unruled = [f.value for f in SignupField if f not in RULES]
if _unruled:
    raise RuntimeError(f"No validation rule for fields: {', '.join(_unruled)}")


def resolve_field(name: Union[str, SignupField]) -> SignupField:
    try:
        return SignupField(name)
    except ValueError:
        raise UnknownFieldError(name) from None


class SignupValidator:
    """
    Stateless field rules for the signup form. Every method is a pure
    function of its arguments so the same instance serves per-field checks
    on change/blur and whole-form checks on submit.
    """

    def validate_field(self, name: Union[str, SignupField], value: str) -> str:
        return RULES[resolve_field(name)](value)

    def validate_form(self, form: SignupForm) -> Dict[str, str]:
        errors: Dict[str, str] = {}

        for field in SignupField:
            error = RULES[field](form.value_of(field.value))
            if error:
                errors[field.value] = error

        return errors

    def is_form_valid(self, form: SignupForm) -> bool:
        return len(self.validate_form(form)) == 0

    @staticmethod
    def is_submit_enabled(form: SignupForm, errors: Dict[str, str]) -> bool:
        """
        Advisory flag for the submit control. showPassword is a display
        toggle and takes no part in it.
        """
        if any(error != "" for error in errors.values()):
            return False
        return all(form.value_of(field.value) != "" for field in SignupField)

    def validate_node(self, state: SignupState) -> SignupState:
        return state.model_copy(update={"errors": self.validate_form(state.form)})

    @staticmethod
    def should_submit(state: SignupState) -> Literal["end", "submit"]:
        return "submit" if len(state.errors) == 0 else "end"
