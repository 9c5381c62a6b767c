"""
Configuration settings for the monkey front end.

This module contains default configuration values and settings used
by the tokenizer and parser.
"""

from dataclasses import dataclass
from typing import List


# Largest value an INT token can carry (signed 64-bit)
INT64_MAX = 2**63 - 1


@dataclass
class Settings:
    """Front end settings and configuration.

    Attributes:
        integer_overflow: What the tokenizer does with a digit run that does
            not fit in a signed 64-bit integer ("illegal" or "saturate")
        valid_overflow_policies: List of valid overflow policy choices
        report_unrecognized_statements: Record a parser error for top-level
            tokens that cannot start a statement instead of skipping them
    """
    integer_overflow: str = "illegal"
    valid_overflow_policies: List[str] = None
    report_unrecognized_statements: bool = False

    def __post_init__(self):
        if self.valid_overflow_policies is None:
            self.valid_overflow_policies = ["illegal", "saturate"]
        if self.integer_overflow not in self.valid_overflow_policies:
            raise ValueError(
                f"Invalid integer overflow policy: {self.integer_overflow!r}. "
                f"Use one of {', '.join(self.valid_overflow_policies)}."
            )

    @property
    def overflow_choices(self) -> List[str]:
        """Get the list of valid overflow policy choices."""
        return self.valid_overflow_policies


# Global default settings instance
DEFAULT_SETTINGS = Settings()
