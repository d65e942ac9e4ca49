# tests/test_confirmation.py

import json

import pytest

from signup.confirmation import HEADING, render_confirmation
from signup.log import configure_logging
from signup.state import SignupForm


def test_renders_payload_verbatim():
    form = SignupForm(first_name="Khushi", email="khushi@gmail.com", show_password=True)

    out = render_confirmation(form)
    heading, body = out.split("\n\n", 1)

    assert heading == HEADING
    data = json.loads(body)
    assert data["firstName"] == "Khushi"
    assert data["email"] == "khushi@gmail.com"
    assert data["showPassword"] is True
    assert list(data) == [
        "firstName", "lastName", "username", "email", "password", "showPassword",
        "phoneCode", "phoneNumber", "country", "city", "pan", "aadhar",
    ]
    assert '\n  "firstName": "Khushi"' in body


def test_configure_logging_accepts_lowercase_level():
    configure_logging("debug")
    configure_logging("INFO")


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")
