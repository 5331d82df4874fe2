"""User entity with a validated email address."""

import re

from .exceptions import InvalidEmailError

# local@domain.tld with no whitespace or extra "@" in any part
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(candidate: object) -> bool:
    """Return True when ``candidate`` looks like ``local@domain.tld``.

    The check is intentionally approximate: no length limits and no RFC 5322
    parsing. Non-string values are never valid.
    """
    if not isinstance(candidate, str):
        return False
    return EMAIL_PATTERN.fullmatch(candidate) is not None


class User:
    """A person with a name, an age and an email address.

    The email is checked both at construction and on every update, so an
    instance never holds an address that fails :func:`is_valid_email`.
    """

    def __init__(self, name: str, age: int, email: str):
        if not is_valid_email(email):
            raise InvalidEmailError(email)
        self.name = name
        self.age = age
        self.email = email

    @staticmethod
    def is_valid_email(candidate: object) -> bool:
        """Same check as the module-level :func:`is_valid_email`."""
        return is_valid_email(candidate)

    def update_email(self, new_email: str) -> None:
        """Replace the email, or raise InvalidEmailError and keep the old one."""
        if not self.is_valid_email(new_email):
            raise InvalidEmailError(new_email)
        self.email = new_email

    def get_details(self) -> str:
        return f"Name: {self.name}, Age: {self.age}, Email: {self.email}"

    def __repr__(self) -> str:
        return f"User(name={self.name!r}, age={self.age!r}, email={self.email!r})"
