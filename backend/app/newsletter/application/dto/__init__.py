"""Data Transfer Objects for the application layer."""

from app.newsletter.application.dto.subscription_dto import (
    ConfirmSubscriptionRequest,
    SubscribeRequest,
)

__all__ = [
    "ConfirmSubscriptionRequest",
    "SubscribeRequest",
]
