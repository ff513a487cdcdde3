"""SubscriberName value object for validated subscriber names."""

from dataclasses import dataclass
from typing import Self

import regex

from app.newsletter.domain.exceptions import ValidationError

MAX_NAME_GRAPHEMES = 256
FORBIDDEN_CHARACTERS = frozenset('/()"<>\\{}')

# A grapheme cluster is what a user perceives as a single character
_GRAPHEME_PATTERN = regex.compile(r"\X")


@dataclass(frozen=True)
class SubscriberName:
    """Immutable value object representing a valid subscriber name.

    A name is invalid if it is empty or whitespace only, is longer than
    256 grapheme clusters, or contains any of ``/ ( ) " < > \\ { }``.

    Attributes:
        value: The validated name, as submitted.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate name constraints after initialization."""
        is_empty_or_whitespace = not self.value.strip()
        is_too_long = len(_GRAPHEME_PATTERN.findall(self.value)) > MAX_NAME_GRAPHEMES
        contains_forbidden_characters = any(
            c in FORBIDDEN_CHARACTERS for c in self.value
        )

        problems = []
        if is_empty_or_whitespace:
            problems.append("is empty")
        if is_too_long:
            problems.append(f"is longer than {MAX_NAME_GRAPHEMES} characters")
        if contains_forbidden_characters:
            problems.append("contains forbidden characters")

        if problems:
            raise ValidationError(
                self.value,
                f"is not a valid subscriber name: {', '.join(problems)}",
            )

    @classmethod
    def parse(cls, value: str) -> Self:
        """Create a SubscriberName from raw form input.

        Raises:
            ValidationError: If the name breaks any naming rule.
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value
