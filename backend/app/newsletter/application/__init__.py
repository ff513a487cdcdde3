"""Application layer - use cases and orchestration.

This layer contains:
- DTOs: Raw request data handed to the use cases
- Interfaces: Ports for external integrations
- Use Cases: Application services that orchestrate domain logic
- Exceptions: Application-level error types
"""

from app.newsletter.application.dto import (
    ConfirmSubscriptionRequest,
    SubscribeRequest,
)
from app.newsletter.application.exceptions import (
    ApplicationError,
    AuthorizationError,
    DispatchError,
    StoreError,
)
from app.newsletter.application.use_cases import (
    ConfirmSubscriptionUseCase,
    SubscribeUseCase,
)

__all__ = [
    # DTOs
    "SubscribeRequest",
    "ConfirmSubscriptionRequest",
    # Use Cases
    "SubscribeUseCase",
    "ConfirmSubscriptionUseCase",
    # Exceptions
    "ApplicationError",
    "StoreError",
    "DispatchError",
    "AuthorizationError",
]
