"""SQLAlchemy implementation of SubscriptionRepository.

Provides async database operations for subscribers and their
confirmation tokens using SQLAlchemy 2.0 async patterns.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.newsletter.application.exceptions import StoreError
from app.newsletter.domain.entities.new_subscriber import NewSubscriber
from app.newsletter.domain.entities.subscriber import Subscriber, SubscriptionStatus
from app.newsletter.domain.repositories.subscription_repository import (
    SubscriptionRepository,
)
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail
from app.newsletter.domain.value_objects.subscriber_name import SubscriberName
from app.newsletter.domain.value_objects.subscription_token import SubscriptionToken
from app.newsletter.infrastructure.db.models import (
    SubscriptionModel,
    SubscriptionTokenModel,
)

logger = logging.getLogger(__name__)


class SqlSubscriptionRepository(SubscriptionRepository):
    """SQLAlchemy-based implementation of the SubscriptionRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with a database session.

        Args:
            session: An async SQLAlchemy session.
        """
        self._session = session

    async def insert_pending(self, new_subscriber: NewSubscriber) -> UUID:
        """Stage a new pending subscriber and return its generated ID."""
        model = SubscriptionModel(
            id=uuid.uuid4(),
            email=new_subscriber.email.value,
            name=new_subscriber.name.value,
            subscribed_at=datetime.now(timezone.utc),
            status=SubscriptionStatus.PENDING_CONFIRMATION,
        )
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert subscriber {new_subscriber.email}: {e}")
            await self._rollback()
            raise StoreError("store the new subscriber") from e
        return model.id

    async def insert_token(self, subscriber_id: UUID, token: SubscriptionToken) -> None:
        """Stage the confirmation token for a subscriber."""
        model = SubscriptionTokenModel(
            subscription_token=token.value,
            subscriber_id=subscriber_id,
        )
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to store token for subscriber {subscriber_id}: {e}")
            await self._rollback()
            raise StoreError("store the subscription token") from e

    async def get_subscriber_id_from_token(
        self, token: SubscriptionToken
    ) -> Optional[UUID]:
        """Look up the subscriber a token was issued to."""
        stmt = select(SubscriptionTokenModel.subscriber_id).where(
            SubscriptionTokenModel.subscription_token == token.value
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to look up subscription token: {e}")
            raise StoreError("look up the subscription token") from e
        return result.scalar_one_or_none()

    async def confirm(self, subscriber_id: UUID) -> None:
        """Stage the status change to confirmed."""
        stmt = (
            update(SubscriptionModel)
            .where(SubscriptionModel.id == subscriber_id)
            .values(status=SubscriptionStatus.CONFIRMED)
        )
        try:
            await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to confirm subscriber {subscriber_id}: {e}")
            await self._rollback()
            raise StoreError("confirm the subscriber") from e

    async def get_by_id(self, subscriber_id: UUID) -> Optional[Subscriber]:
        """Retrieve a subscriber by its ID."""
        stmt = select(SubscriptionModel).where(SubscriptionModel.id == subscriber_id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load subscriber {subscriber_id}: {e}")
            raise StoreError("load the subscriber") from e
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def commit(self) -> None:
        """Commit the current transaction."""
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to commit transaction: {e}")
            await self._rollback()
            raise StoreError("commit the transaction") from e

    async def _rollback(self) -> None:
        """Roll back after a failed write without masking the original error.

        A rollback failure is logged; the session is discarded on close anyway.
        """
        try:
            await self._session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")

    def _to_entity(self, model: SubscriptionModel) -> Subscriber:
        """Convert a SubscriptionModel to a Subscriber domain entity."""
        return Subscriber(
            id=model.id,
            email=SubscriberEmail(model.email),
            name=SubscriberName(model.name),
            subscribed_at=model.subscribed_at,
            status=model.status,
        )
