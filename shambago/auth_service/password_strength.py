"""
Password strength meter and generator used by the sign-up form.
"""

import secrets
import string
from typing import NamedTuple

SPECIAL_CHARACTERS = "!@#$%^&*"
PASSWORD_ALPHABET = string.ascii_letters + string.digits + SPECIAL_CHARACTERS
MIN_STRONG_LENGTH = 8


class PasswordStrength(NamedTuple):
    score: float
    label: str


EMPTY = PasswordStrength(0.0, "Empty")
WEAK = PasswordStrength(0.25, "Weak")
FAIR = PasswordStrength(0.5, "Fair")
GOOD = PasswordStrength(0.75, "Good")
STRONG = PasswordStrength(1.0, "Strong")

# Criteria met -> strength, for passwords of at least MIN_STRONG_LENGTH
_BY_CRITERIA = {1: WEAK, 2: FAIR, 3: GOOD, 4: STRONG}


def evaluate_password(password: str) -> PasswordStrength:
    """
    Rate a password by length and character variety.

    Args:
        password: Password being typed.

    Returns:
        PasswordStrength: Score in [0, 1] and its label.
    """
    if not password:
        return EMPTY

    if len(password) < MIN_STRONG_LENGTH:
        return WEAK

    criteria = [
        any(ch.isupper() for ch in password),
        any(ch.islower() for ch in password),
        any(ch.isdigit() for ch in password),
        any(ch in SPECIAL_CHARACTERS for ch in password),
    ]

    return _BY_CRITERIA.get(sum(criteria), EMPTY)


def generate_secure_password(length: int = 16) -> str:
    """
    Generate a random password from letters, digits and symbols.

    Raises:
        ValueError: If length is not positive.
    """
    if length <= 0:
        raise ValueError("Password length must be positive")

    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
