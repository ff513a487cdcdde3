"""Use case for registering a new newsletter subscriber.

Implements registration by orchestrating:
- Form validation via the NewSubscriber aggregate
- Subscriber and token persistence via SubscriptionRepository
- Confirmation email delivery via EmailSender
"""

import logging
from typing import Optional, Union

from app.core.logging import get_logger
from app.newsletter.application.dto.subscription_dto import SubscribeRequest
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.domain.entities.new_subscriber import NewSubscriber
from app.newsletter.domain.repositories.subscription_repository import (
    SubscriptionRepository,
)
from app.newsletter.domain.value_objects.subscription_token import SubscriptionToken

CONFIRMATION_PATH = "/subscriptions/confirm"
CONFIRMATION_SUBJECT = "Welcome!"

Logger = Union[logging.Logger, logging.LoggerAdapter]


def build_confirmation_link(base_url: str, token: SubscriptionToken) -> str:
    """Build the link a subscriber follows to confirm their subscription."""
    return f"{base_url.rstrip('/')}{CONFIRMATION_PATH}?subscription_token={token.value}"


class SubscribeUseCase:
    """Application service for registering a pending subscriber.

    The subscriber row and its confirmation token are committed together
    before the confirmation email is sent. If sending fails, the
    subscriber stays pending with a usable token.
    """

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        email_sender: EmailSender,
        base_url: str,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            subscription_repository: Repository for subscriber persistence.
            email_sender: Provider used to send the confirmation email.
            base_url: Public base URL of this application.
            logger: Request-scoped logger; the module logger if omitted.
        """
        self._subscription_repository = subscription_repository
        self._email_sender = email_sender
        self._base_url = base_url
        self._logger = logger or get_logger(__name__)

    async def execute(self, request: SubscribeRequest) -> None:
        """Execute the registration.

        Args:
            request: Raw form data submitted by the user.

        Raises:
            ValidationError: If the name or email is invalid.
            StoreError: If the subscriber or token could not be stored.
            DispatchError: If the confirmation email could not be sent.
        """
        # 1. Validate input; nothing is stored if this fails
        new_subscriber = NewSubscriber.parse(name=request.name, email=request.email)

        self._logger.info(
            f"Adding a new subscriber: email={new_subscriber.email} "
            f"name={new_subscriber.name}"
        )

        # 2. Store the pending subscriber and its token in one unit of work
        subscriber_id = await self._subscription_repository.insert_pending(new_subscriber)
        token = SubscriptionToken.generate()
        await self._subscription_repository.insert_token(subscriber_id, token)
        await self._subscription_repository.commit()

        self._logger.info(f"Stored pending subscriber {subscriber_id}")

        # 3. Send the confirmation email
        await self._send_confirmation_email(new_subscriber, token)

        self._logger.info(f"Sent confirmation email to {new_subscriber.email}")

    async def _send_confirmation_email(
        self, new_subscriber: NewSubscriber, token: SubscriptionToken
    ) -> None:
        """Send the email carrying the confirmation link."""
        confirmation_link = build_confirmation_link(self._base_url, token)
        html_body = (
            "Welcome to our newsletter!<br />"
            f'Click <a href="{confirmation_link}">here</a> to confirm your subscription.'
        )
        text_body = (
            "Welcome to our newsletter!\n"
            f"Visit {confirmation_link} to confirm your subscription."
        )

        await self._email_sender.send_email(
            new_subscriber.email,
            CONFIRMATION_SUBJECT,
            html_body,
            text_body,
        )
