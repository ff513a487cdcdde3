"""NewSubscriber aggregate built from a submitted subscription form."""

from dataclasses import dataclass
from typing import Self

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName


@dataclass(frozen=True)
class NewSubscriber:
    """Everything needed to register a new subscriber.

    Has no identity of its own; it is consumed by the registration
    workflow as soon as it is built.
    """

    email: SubscriberEmail
    name: SubscriberName

    @classmethod
    def parse(cls, name: str, email: str) -> Self:
        """Validate raw form fields into a NewSubscriber.

        Raises:
            ValidationError: If either the name or the email is invalid.
        """
        return cls(email=SubscriberEmail.parse(email), name=SubscriberName.parse(name))
