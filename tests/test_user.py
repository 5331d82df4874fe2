"""Tests for the User entity and email validation."""

import pytest

from showcase.exceptions import InvalidEmailError, ShowcaseError
from showcase.user import User, is_valid_email


class TestIsValidEmail:
    """Test cases for the email shape predicate."""

    @pytest.mark.parametrize(
        "email",
        [
            "alice@example.com",
            "a@b.c",
            "first.last+tag@sub.example.co.uk",
            "user@domain.with.many.dots",
            "ünïcode@exämple.org",
        ],
    )
    def test_valid_addresses(self, email):
        assert is_valid_email(email) is True

    @pytest.mark.parametrize(
        "email",
        [
            "",
            "alice",
            "alice.example.com",
            "alice@example",
            "@example.com",
            "alice@.com",
            "alice@example.",
            "alice @example.com",
            "alice@exa mple.com",
            "alice@@example.com",
            "alice@example.com\n",
        ],
    )
    def test_invalid_addresses(self, email):
        assert is_valid_email(email) is False

    def test_non_string_is_invalid(self):
        assert is_valid_email(None) is False
        assert is_valid_email(42) is False

    def test_method_matches_module_function(self):
        assert User.is_valid_email("bob@example.org") is True
        assert User.is_valid_email("bob") is False


class TestUser:
    """Test cases for User."""

    def test_get_details(self):
        user = User("Alice", 28, "alice@example.com")

        assert user.get_details() == "Name: Alice, Age: 28, Email: alice@example.com"

    def test_update_email_replaces_value(self):
        user = User("Alice", 28, "alice@example.com")

        user.update_email("newalice@example.com")

        assert user.email == "newalice@example.com"
        assert user.get_details() == "Name: Alice, Age: 28, Email: newalice@example.com"

    def test_failed_update_leaves_email_unchanged(self):
        user = User("Alice", 28, "alice@example.com")

        with pytest.raises(InvalidEmailError) as exc_info:
            user.update_email("not-an-email")

        assert user.email == "alice@example.com"
        assert exc_info.value.email == "not-an-email"
        assert "Invalid Email Address" in str(exc_info.value)

    def test_update_can_repeat(self):
        user = User("Alice", 28, "alice@example.com")

        user.update_email("one@example.com")
        user.update_email("two@example.com")

        assert user.email == "two@example.com"

    def test_constructor_rejects_invalid_email(self):
        with pytest.raises(InvalidEmailError):
            User("Alice", 28, "alice")

    def test_invalid_email_error_is_value_error(self):
        with pytest.raises(ValueError):
            User("Alice", 28, "alice")
        assert issubclass(InvalidEmailError, ShowcaseError)

    def test_repr(self):
        user = User("Alice", 28, "alice@example.com")

        assert repr(user) == "User(name='Alice', age=28, email='alice@example.com')"
