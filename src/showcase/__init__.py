"""
Showcase: a small tour of a validated entity, an async delay, a JSON fetch and a factorial.
"""

__version__ = "2026.10.19.1"
__author__ = "Showcase Team"
__description__ = "A small tour of a validated entity, an async delay, a JSON fetch and a factorial"

from .exceptions import (
    DecodeError,
    FetchError,
    HttpStatusError,
    InvalidEmailError,
    NegativeInputError,
    NetworkError,
    ShowcaseError,
)
from .mathutils import factorial
from .user import User, is_valid_email

__all__ = [
    "DecodeError",
    "FetchError",
    "HttpStatusError",
    "InvalidEmailError",
    "NegativeInputError",
    "NetworkError",
    "ShowcaseError",
    "User",
    "factorial",
    "is_valid_email",
]
