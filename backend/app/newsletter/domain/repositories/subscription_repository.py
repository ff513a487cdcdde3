"""Abstract repository interface for subscriptions and their tokens."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.new_subscriber import NewSubscriber
from ..entities.subscriber import Subscriber
from ..value_objects.subscription_token import SubscriptionToken


class SubscriptionRepository(ABC):
    """Abstract repository for subscriber persistence operations.

    Writes are staged in the current unit of work and only become
    visible to other sessions after ``commit``. Implementations raise
    ``StoreError`` when the underlying store fails.
    """

    @abstractmethod
    async def insert_pending(self, new_subscriber: NewSubscriber) -> UUID:
        """Store a new subscriber with status ``pending_confirmation``.

        Args:
            new_subscriber: The validated registration data.

        Returns:
            The identifier generated for the new subscriber.
        """
        pass

    @abstractmethod
    async def insert_token(self, subscriber_id: UUID, token: SubscriptionToken) -> None:
        """Store the confirmation token issued to a subscriber.

        Args:
            subscriber_id: The subscriber the token belongs to.
            token: The token to persist.
        """
        pass

    @abstractmethod
    async def get_subscriber_id_from_token(
        self, token: SubscriptionToken
    ) -> Optional[UUID]:
        """Look up the subscriber a confirmation token was issued to.

        Args:
            token: The token received from a confirmation link.

        Returns:
            The subscriber ID if the token is known, None otherwise.
        """
        pass

    @abstractmethod
    async def confirm(self, subscriber_id: UUID) -> None:
        """Set the subscriber's status to ``confirmed``.

        Confirming an already confirmed subscriber has no effect.

        Args:
            subscriber_id: The subscriber to activate.
        """
        pass

    @abstractmethod
    async def get_by_id(self, subscriber_id: UUID) -> Optional[Subscriber]:
        """Retrieve a subscriber by ID.

        Returns:
            The Subscriber entity if found, None otherwise.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit every write staged since the last commit."""
        pass
