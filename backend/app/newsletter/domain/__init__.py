# Domain layer - pure business rules, no framework dependencies

from app.newsletter.domain.entities import (
    NewSubscriber,
    Subscriber,
    SubscriptionStatus,
)
from app.newsletter.domain.exceptions import ValidationError
from app.newsletter.domain.value_objects import (
    SubscriberEmail,
    SubscriberName,
    SubscriptionToken,
)

__all__ = [
    # Entities
    "NewSubscriber",
    "Subscriber",
    "SubscriptionStatus",
    # Value objects
    "SubscriberEmail",
    "SubscriberName",
    "SubscriptionToken",
    # Errors
    "ValidationError",
]
