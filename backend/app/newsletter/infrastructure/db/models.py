"""SQLAlchemy ORM models mapping to domain entities.

These models represent the database schema and handle persistence concerns.
They should be converted to/from domain entities via repository mappers.
"""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy import Enum as SQLEnum
from sqlalchemy.orm import DeclarativeBase, relationship

# Import domain enums for SQLAlchemy Enum columns
from app.newsletter.domain.entities.subscriber import SubscriptionStatus


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class SubscriptionModel(Base):
    """ORM model for subscriptions table."""

    __tablename__ = "subscriptions"

    id = Column(Uuid, primary_key=True)
    # One registration per address; a second one fails with a StoreError
    email = Column(String(320), unique=True, nullable=False, index=True)
    # Unbounded: names are capped in graphemes, not code points
    name = Column(Text, nullable=False)
    subscribed_at = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        SQLEnum(
            SubscriptionStatus,
            name="subscription_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=SubscriptionStatus.PENDING_CONFIRMATION,
    )

    # Relationships
    tokens = relationship(
        "SubscriptionTokenModel", back_populates="subscriber", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<SubscriptionModel(id={self.id}, status='{self.status}')>"


class SubscriptionTokenModel(Base):
    """ORM model for subscription_tokens table."""

    __tablename__ = "subscription_tokens"

    subscription_token = Column(String(64), primary_key=True)
    subscriber_id = Column(
        Uuid, ForeignKey("subscriptions.id"), nullable=False, index=True
    )

    # Relationships
    subscriber = relationship("SubscriptionModel", back_populates="tokens")

    def __repr__(self) -> str:
        return f"<SubscriptionTokenModel(subscriber_id={self.subscriber_id})>"
