"""Domain value objects for the newsletter service.

This module exports immutable value objects used throughout the domain layer:
- SubscriberName: Validated subscriber display names
- SubscriberEmail: Validated subscriber email addresses
- SubscriptionToken: Opaque confirmation tokens
"""

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName
from app.newsletter.domain.value_objects.subscription_token import SubscriptionToken

__all__ = ["SubscriberEmail", "SubscriberName", "SubscriptionToken"]
