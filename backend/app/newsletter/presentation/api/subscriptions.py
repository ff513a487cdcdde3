"""Subscription API endpoints.

- POST /subscribe - Register a pending subscriber and send a confirmation email
- GET /subscriptions/confirm - Redeem a confirmation token
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.logging import get_request_logger
from app.newsletter.application.dto.subscription_dto import (
    ConfirmSubscriptionRequest,
    SubscribeRequest,
)
from app.newsletter.application.exceptions import (
    AuthorizationError,
    DispatchError,
    StoreError,
)
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.application.use_cases.confirm_subscription import (
    ConfirmSubscriptionUseCase,
)
from app.newsletter.application.use_cases.subscribe import SubscribeUseCase
from app.newsletter.domain.exceptions import ValidationError
from app.newsletter.infrastructure.db.session import get_db_session
from app.newsletter.infrastructure.repositories.sql_subscription_repository import (
    SqlSubscriptionRepository,
)
from app.newsletter.presentation.api.deps import get_email_sender

router = APIRouter()


@router.post("/subscribe", status_code=status.HTTP_200_OK)
async def subscribe(
    name: Annotated[Optional[str], Form(description="Subscriber name")] = None,
    email: Annotated[Optional[str], Form(description="Subscriber email")] = None,
    session: AsyncSession = Depends(get_db_session),
    email_sender: EmailSender = Depends(get_email_sender),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Register a new subscriber.

    The subscriber is stored as pending and a confirmation link is
    emailed to them.

    Raises:
        HTTPException: 400 if a field is missing or invalid.
        HTTPException: 500 if storing or emailing fails.
    """
    logger = get_request_logger(__name__)

    if name is None or email is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both 'name' and 'email' form fields are required.",
        )

    use_case = SubscribeUseCase(
        subscription_repository=SqlSubscriptionRepository(session),
        email_sender=email_sender,
        base_url=settings.app_base_url,
        logger=logger,
    )

    try:
        await use_case.execute(SubscribeRequest(name=name, email=email))
    except ValidationError as e:
        logger.info(f"Rejected subscription form: {e.reason}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reason,
        ) from e
    except (StoreError, DispatchError) as e:
        logger.error(f"Subscription failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not complete the subscription.",
        ) from e

    return Response(status_code=status.HTTP_200_OK)


@router.get("/subscriptions/confirm", status_code=status.HTTP_200_OK)
async def confirm_subscription(
    subscription_token: Annotated[
        Optional[str], Query(description="Token from the confirmation email")
    ] = None,
    session: AsyncSession = Depends(get_db_session),
) -> Response:
    """Confirm a pending subscription.

    Raises:
        HTTPException: 400 if the token is missing or malformed.
        HTTPException: 401 if the token is unknown.
        HTTPException: 500 if the store fails.
    """
    logger = get_request_logger(__name__)

    if subscription_token is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="The 'subscription_token' query parameter is required.",
        )

    use_case = ConfirmSubscriptionUseCase(
        subscription_repository=SqlSubscriptionRepository(session),
        logger=logger,
    )

    try:
        await use_case.execute(
            ConfirmSubscriptionRequest(subscription_token=subscription_token)
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.reason,
        ) from e
    except AuthorizationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        ) from e
    except StoreError as e:
        logger.error(f"Confirmation failed: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not confirm the subscription.",
        ) from e

    return Response(status_code=status.HTTP_200_OK)
