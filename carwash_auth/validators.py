"""Password and credential input validation"""

import re
from typing import Optional

MIN_PASSWORD_LENGTH = 8


def password_strength(password: str) -> int:
    """Score a password from 0 to 4

    One point each for: minimum length, mixed case, a digit, a symbol.
    """
    if not password:
        return 0

    strength = 0
    if len(password) >= MIN_PASSWORD_LENGTH:
        strength += 1
    if re.search(r"[a-z]", password) and re.search(r"[A-Z]", password):
        strength += 1
    if re.search(r"[0-9]", password):
        strength += 1
    if re.search(r"[^a-zA-Z0-9]", password):
        strength += 1
    return strength


def strength_label(strength: int) -> str:
    if strength <= 1:
        return "Weak"
    if strength == 2:
        return "Fair"
    if strength == 3:
        return "Good"
    return "Strong"


def validate_new_password(password: str, confirmation: str) -> Optional[str]:
    """Check a new password and its confirmation

    Returns:
        An error message, or None when the password is acceptable
    """
    if password != confirmation:
        return "Passwords do not match"
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    return None
