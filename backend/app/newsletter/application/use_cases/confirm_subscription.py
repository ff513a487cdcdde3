"""Use case for confirming a pending subscription."""

import logging
from typing import Optional, Union

from app.core.logging import get_logger
from app.newsletter.application.dto.subscription_dto import ConfirmSubscriptionRequest
from app.newsletter.application.exceptions import AuthorizationError
from app.newsletter.domain.repositories.subscription_repository import (
    SubscriptionRepository,
)
from app.newsletter.domain.value_objects.subscription_token import SubscriptionToken

Logger = Union[logging.Logger, logging.LoggerAdapter]


class ConfirmSubscriptionUseCase:
    """Application service that redeems a confirmation token.

    Redeeming a token that was already used leaves the subscriber
    confirmed; tokens never expire.
    """

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        logger: Optional[Logger] = None,
    ) -> None:
        self._subscription_repository = subscription_repository
        self._logger = logger or get_logger(__name__)

    async def execute(self, request: ConfirmSubscriptionRequest) -> None:
        """Execute the confirmation.

        Args:
            request: Token received through the confirmation link.

        Raises:
            ValidationError: If the token is malformed. No lookup is made.
            AuthorizationError: If no subscriber holds the token.
            StoreError: If the store could not be read or updated.
        """
        token = SubscriptionToken.parse(request.subscription_token)

        subscriber_id = await self._subscription_repository.get_subscriber_id_from_token(
            token
        )
        if subscriber_id is None:
            self._logger.warning("Confirmation attempted with an unknown token")
            raise AuthorizationError()

        await self._subscription_repository.confirm(subscriber_id)
        await self._subscription_repository.commit()

        self._logger.info(f"Confirmed subscriber {subscriber_id}")
