"""SubscriptionToken value object for confirmation links."""

import secrets
import string
from dataclasses import dataclass
from typing import Self

from app.newsletter.domain.exceptions import ValidationError

TOKEN_LENGTH = 25
_TOKEN_ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class SubscriptionToken:
    """Opaque confirmation token sent to a pending subscriber.

    Tokens are 25 ASCII alphanumeric characters drawn from a CSPRNG,
    roughly 148 bits of entropy.

    Attributes:
        value: The token string.
    """

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != TOKEN_LENGTH or not all(
            c in _TOKEN_ALPHABET for c in self.value
        ):
            raise ValidationError(self.value, "is not a valid subscription token")

    @classmethod
    def generate(cls) -> Self:
        """Generate a new random token."""
        return cls("".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH)))

    @classmethod
    def parse(cls, value: str) -> Self:
        """Create a SubscriptionToken from a request parameter.

        Raises:
            ValidationError: If the value does not have the token shape.
        """
        return cls(value)

    def __str__(self) -> str:
        return self.value
