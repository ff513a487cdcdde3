"""Domain repository interfaces for the newsletter service.

Concrete implementations live in the infrastructure layer
(e.g., backend/app/newsletter/infrastructure/repositories/).
"""

from app.newsletter.domain.repositories.subscription_repository import (
    SubscriptionRepository,
)

__all__ = ["SubscriptionRepository"]
