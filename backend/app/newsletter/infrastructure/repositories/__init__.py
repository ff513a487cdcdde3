"""Infrastructure repository implementations.

This module exports concrete repository implementations that fulfill
the abstract interfaces defined in the domain layer.
"""

from app.newsletter.infrastructure.repositories.sql_subscription_repository import (
    SqlSubscriptionRepository,
)

__all__ = [
    "SqlSubscriptionRepository",
]
