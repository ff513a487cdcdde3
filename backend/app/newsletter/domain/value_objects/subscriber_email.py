"""SubscriberEmail value object for validated email storage."""

from dataclasses import dataclass
from typing import Self

from email_validator import EmailNotValidError, validate_email

from app.newsletter.domain.exceptions import ValidationError


@dataclass(frozen=True)
class SubscriberEmail:
    """Immutable value object representing a syntactically valid email address.

    Only syntax is checked; no DNS lookup is made for the domain.

    Attributes:
        value: The validated email address string, as submitted.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization."""
        try:
            validate_email(self.value, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValidationError(
                self.value, f"is not a valid subscriber email: {e}"
            ) from e

    @classmethod
    def parse(cls, value: str) -> Self:
        """Create a SubscriberEmail from raw form input.

        Raises:
            ValidationError: If the address is not valid email syntax.
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value
