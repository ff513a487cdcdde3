"""Application use cases for orchestrating domain logic."""

from app.newsletter.application.use_cases.confirm_subscription import (
    ConfirmSubscriptionUseCase,
)
from app.newsletter.application.use_cases.subscribe import (
    SubscribeUseCase,
    build_confirmation_link,
)

__all__ = [
    "SubscribeUseCase",
    "ConfirmSubscriptionUseCase",
    "build_confirmation_link",
]
