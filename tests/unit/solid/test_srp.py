"""
Tests for the single responsibility kata.

These tests demonstrate:
- Each responsibility tested in isolation with its own small object
- Validation happening at construction of the data holder
"""

import pytest
from pydantic import ValidationError

from katas.solid import srp_bad
from katas.solid.srp_good import EmailService, User, UserFileManager, UserValidator


@pytest.fixture
def user() -> User:
    return User(name="John Doe", email="john@example.com")


def test_user_holds_data(user: User):
    assert user.name == "John Doe"
    assert user.email == "john@example.com"


def test_user_rejects_invalid_email():
    with pytest.raises(ValidationError, match="Invalid email address"):
        User(name="John Doe", email="john.example.com")


@pytest.mark.parametrize(
    ("email", "expected"),
    [("john@example.com", True), ("@example.com", False), ("john@", False), ("john", False)],
)
def test_validator_checks_email_shape(email: str, expected: bool):
    assert UserValidator.is_valid_email(email) is expected


def test_email_service_handles_email(user: User):
    assert "Enviando email de bienvenida a john@example.com" in EmailService().send_welcome_email(user)


def test_file_manager_handles_storage(user: User):
    assert UserFileManager().save_to_file(user) == "Guardando usuario John Doe en archivo users.txt"
    assert UserFileManager("backup.csv").save_to_file(user).endswith("backup.csv")


def test_bad_user_does_everything_itself():
    user = srp_bad.User("John Doe", "john@example.com")

    assert user.validate_email() is True
    assert "john@example.com" in user.send_welcome_email()
    assert "John Doe" in user.save_to_file()
