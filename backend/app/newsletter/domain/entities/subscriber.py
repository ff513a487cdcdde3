"""Subscriber entity representing a persisted newsletter subscription."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName


class SubscriptionStatus(Enum):
    """Lifecycle status of a subscription."""

    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"


@dataclass
class Subscriber:
    """Domain entity representing a stored subscriber.

    Attributes:
        id: Unique identifier assigned at registration.
        email: Validated email address of the subscriber.
        name: Validated display name of the subscriber.
        subscribed_at: Timestamp when the registration was stored.
        status: Current status; only moves from pending to confirmed.
    """

    id: UUID
    email: SubscriberEmail
    name: SubscriberName
    subscribed_at: datetime
    status: SubscriptionStatus = SubscriptionStatus.PENDING_CONFIRMATION
