import re

from inkpost.core.config.settings import (
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PASSWORD_REQUIRE_DIGIT,
    PASSWORD_REQUIRE_LOWERCASE,
    PASSWORD_REQUIRE_UPPERCASE,
)
from inkpost.core.exceptions import PasswordPolicyError

PASSWORD_POLICY_MESSAGE = (
    "Password should be 6 to 20 characters long with a numeric, "
    "1 lowercase and 1 uppercase letter"
)


class PasswordPolicyValidator:
    """Validates passwords against a defined security policy.

    The policy requires passwords to be between the minimum and maximum
    length and to include an uppercase letter, a lowercase letter and a digit.
    Every failure is reported with the same message so the client can show a
    single hint under the password field.
    """

    def __init__(self):
        self.min_length = PASSWORD_MIN_LENGTH
        self.max_length = PASSWORD_MAX_LENGTH
        self.require_uppercase = PASSWORD_REQUIRE_UPPERCASE
        self.require_lowercase = PASSWORD_REQUIRE_LOWERCASE
        self.require_digit = PASSWORD_REQUIRE_DIGIT

    def validate(self, password: str):
        """Validates the given password against the policy.

        Args:
            password (str): The password to validate.

        Raises:
            PasswordPolicyError: If the password does not meet the policy requirements.

        """
        password = password or ""

        if not self.min_length <= len(password) <= self.max_length:
            raise PasswordPolicyError(PASSWORD_POLICY_MESSAGE)

        if self.require_uppercase and not re.search(r"[A-Z]", password):
            raise PasswordPolicyError(PASSWORD_POLICY_MESSAGE)

        if self.require_lowercase and not re.search(r"[a-z]", password):
            raise PasswordPolicyError(PASSWORD_POLICY_MESSAGE)

        if self.require_digit and not re.search(r"\d", password):
            raise PasswordPolicyError(PASSWORD_POLICY_MESSAGE)
