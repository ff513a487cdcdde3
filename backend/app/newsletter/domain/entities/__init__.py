"""Domain entities for the newsletter service.

This module exports the core business entities used throughout the domain layer.
"""

from app.newsletter.domain.entities.new_subscriber import NewSubscriber
from app.newsletter.domain.entities.subscriber import Subscriber, SubscriptionStatus

__all__ = [
    "NewSubscriber",
    "Subscriber",
    "SubscriptionStatus",
]
