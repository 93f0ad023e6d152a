"""Tests for the offline password policy validator."""

from breachcheck.policy import (
    COMMON_PASSWORDS,
    MAX_SCORE,
    PolicyValidator,
    check_password_strength,
    score_password,
)


class TestPasswordStrength:
    """Test cases for password strength analysis."""

    def test_strong_password(self):
        strength, feedback = check_password_strength("Tr0ub4dor&3#Xy9!")
        assert strength == "Strong"
        assert feedback == []

    def test_weak_short_password(self):
        strength, feedback = check_password_strength("abc")
        assert strength == "Weak"
        assert any("12" in f for f in feedback)

    def test_common_password_detection(self):
        for common_pwd in ["password", "123456", "qwerty", "admin"]:
            strength, feedback = check_password_strength(common_pwd)
            assert strength == "Weak"
            assert any("common" in f.lower() for f in feedback)

    def test_case_insensitive_common_check(self):
        for variant in ["PASSWORD", "Password", "pAsSwOrD"]:
            score, feedback = score_password(variant)
            assert score == 0
            assert any("common" in f.lower() for f in feedback)

    def test_missing_classes_feedback(self):
        _, feedback = score_password("lowercaseonly")
        text = " ".join(feedback).lower()
        assert "uppercase" in text
        assert "numbers" in text
        assert "special" in text

    def test_empty_password(self):
        strength, feedback = check_password_strength("")
        assert strength == "Weak"
        assert len(feedback) > 0

    def test_bytes_accepted(self):
        assert score_password(b"Tr0ub4dor&3#Xy9!")[0] == MAX_SCORE

    def test_common_passwords_set_not_empty(self):
        assert "password" in COMMON_PASSWORDS


class TestPolicyValidator:
    """Test the validator interface."""

    def test_validate(self):
        validator = PolicyValidator(min_score=4)
        assert validator.validate("Tr0ub4dor&3#Xy9!") is True
        assert validator.validate("abc") is False

    def test_strength_range(self):
        validator = PolicyValidator()
        assert validator.get_strength("Tr0ub4dor&3#Xy9!") == 100
        assert validator.get_strength("password") == 0
        assert 0 < validator.get_strength("abcdefgh1") < 100
