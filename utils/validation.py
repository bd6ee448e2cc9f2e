"""
Validation Utilities
Helpers for cleaning up user input before it is matched against commands
"""

import re

ZERO_WIDTH_REGEX = re.compile(r"[\u200B-\u200D\uFEFF]")
CONTROL_CHARS_REGEX = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F-\x9F]")


class ValidationUtils:
    """Utility class for input validation."""

    @staticmethod
    def sanitize_input(input_value: str) -> str:
        """
        Strip whitespace, zero-width and control characters.

        Newlines and tabs are kept so argument splitting still sees them.

        Args:
            input_value: Input to sanitize

        Returns:
            Sanitized input string
        """
        if not isinstance(input_value, str):
            return ""

        sanitized = ZERO_WIDTH_REGEX.sub("", input_value)
        sanitized = CONTROL_CHARS_REGEX.sub("", sanitized)
        return sanitized.strip()
