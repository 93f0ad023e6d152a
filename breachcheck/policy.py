"""Offline password policy, usable as a secondary validator.

Scores length, character classes and a small common-password list. It is
consulted only after the breach check has come back clean.
"""

import re
from typing import Union

# common weak passwords examples
COMMON_PASSWORDS = {
    "password", "123456", "12345678", "123456789", "qwerty", "letmein",
    "admin", "welcome", "iloveyou", "monkey", "dragon", "abc123",
    "football", "baseball", "sunshine", "princess", "passw0rd", "trustno1",
}

MAX_SCORE = 6


def _as_text(password: Union[str, bytes]) -> str:
    if isinstance(password, (bytes, bytearray)):
        return bytes(password).decode("utf-8", errors="replace")
    return password or ""


def score_password(password: Union[str, bytes]) -> tuple[int, list[str]]:
    """Score a password from 0 to MAX_SCORE with improvement feedback."""
    password = _as_text(password)
    score = 0
    feedback = []

    # check length
    if len(password) >= 12:
        score += 2
    elif len(password) >= 8:
        score += 1
    else:
        feedback.append("Use at least 12 characters.")

    # check for different character types
    if re.search(r'[A-Z]', password):
        score += 1
    else:
        feedback.append("Add uppercase letters.")

    if re.search(r'[a-z]', password):
        score += 1
    else:
        feedback.append("Add lowercase letters.")

    if re.search(r'\d', password):
        score += 1
    else:
        feedback.append("Add numbers.")

    if re.search(r'[^A-Za-z0-9\s]', password):
        score += 1
    else:
        feedback.append("Add special characters.")

    if password.lower() in COMMON_PASSWORDS:
        feedback.append("This is a very common password!")
        score = 0

    return score, feedback


def check_password_strength(password: Union[str, bytes]) -> tuple[str, list[str]]:
    """Rate a password as Strong, Medium or Weak with feedback."""
    score, feedback = score_password(password)

    if score >= 6:
        strength = "Strong"
    elif score >= 4:
        strength = "Medium"
    else:
        strength = "Weak"

    return strength, feedback


class PolicyValidator:
    """Secondary validator enforcing a minimum policy score."""

    def __init__(self, min_score: int = 4):
        self.min_score = min_score

    def validate(self, password: Union[str, bytes]) -> bool:
        score, _ = score_password(password)
        return score >= self.min_score

    def get_strength(self, password: Union[str, bytes]) -> int:
        score, _ = score_password(password)
        return score * 100 // MAX_SCORE
