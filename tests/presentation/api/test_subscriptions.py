"""Tests for the subscription API router.

Runs the router against a SQLite database and a mocked email sender,
following a registration through to its confirmation.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.core.config import Settings, get_settings
from app.newsletter.application.exceptions import DispatchError, StoreError
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.domain.entities.subscriber import SubscriptionStatus
from app.newsletter.domain.value_objects.subscription_token import SubscriptionToken
from app.newsletter.infrastructure.db.models import Base, SubscriptionModel
from app.newsletter.infrastructure.db.session import get_db_session
from app.newsletter.presentation.api.deps import get_email_sender
from app.newsletter.presentation.api.subscriptions import router

BASE_URL = "http://127.0.0.1:8000"
VALID_FORM = {"name": "le guin", "email": "ursula_le_guin@gmail.com"}


@dataclass
class ConfirmationLinks:
    """Links found in the confirmation email."""

    html: httpx.URL
    plain_text: httpx.URL


@dataclass
class TestApp:
    """Test client plus handles on the database and the email sender."""

    __test__ = False

    client: TestClient
    session_factory: async_sessionmaker[AsyncSession]
    email_sender: AsyncMock

    def post_subscriptions(self, data: dict[str, str]) -> httpx.Response:
        return self.client.post("/subscribe", data=data)

    def get_confirmation(self, params: Optional[dict[str, str]] = None) -> httpx.Response:
        return self.client.get("/subscriptions/confirm", params=params)

    def follow(self, link: httpx.URL) -> httpx.Response:
        return self.client.get(link.path, params=link.params)

    def saved_subscriptions(self) -> list[dict[str, Any]]:
        async def _fetch() -> list[dict[str, Any]]:
            async with self.session_factory() as session:
                result = await session.execute(select(SubscriptionModel))
                return [
                    {"email": m.email, "name": m.name, "status": m.status}
                    for m in result.scalars().all()
                ]

        return self.client.portal.call(_fetch)

    def get_confirmation_links(self, call_index: int = 0) -> ConfirmationLinks:
        """Pull the single link out of each body of a sent email."""
        _recipient, _subject, html_body, text_body = (
            self.email_sender.send_email.call_args_list[call_index].args
        )

        def get_link(body: str) -> httpx.URL:
            links = re.findall(r"https?://[^\s\"'<>]+", body)
            assert len(links) == 1
            link = httpx.URL(links[0])
            # Tests must never point at a real host
            assert link.host == "127.0.0.1"
            return link

        return ConfirmationLinks(html=get_link(html_body), plain_text=get_link(text_body))


async def _create_schema(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with the subscriptions router."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def email_sender() -> AsyncMock:
    """Create a mock email sender that accepts every message."""
    return AsyncMock(spec=EmailSender)


@pytest.fixture
def test_app(app: FastAPI, database_url: str, email_sender: AsyncMock) -> Iterator[TestApp]:
    """Wire the router to SQLite and the mock sender, and start the client."""
    # NullPool keeps every connection on the client's event loop
    engine = create_async_engine(database_url, poolclass=NullPool)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    app.dependency_overrides[get_settings] = lambda: Settings(app_base_url=BASE_URL)

    with TestClient(app) as client:
        client.portal.call(_create_schema, engine)
        yield TestApp(client=client, session_factory=session_factory, email_sender=email_sender)
        client.portal.call(engine.dispose)


class TestSubscribe:
    """Tests for POST /subscribe."""

    def test_subscribe_returns_200_for_valid_form_data(self, test_app: TestApp) -> None:
        """Test a valid form stores a pending subscriber."""
        response = test_app.post_subscriptions(VALID_FORM)

        assert response.status_code == 200
        saved = test_app.saved_subscriptions()
        assert saved == [
            {
                "email": "ursula_le_guin@gmail.com",
                "name": "le guin",
                "status": SubscriptionStatus.PENDING_CONFIRMATION,
            }
        ]

    def test_subscribe_sends_a_confirmation_email(self, test_app: TestApp) -> None:
        """Test exactly one email is sent with matching links."""
        test_app.post_subscriptions(VALID_FORM)

        test_app.email_sender.send_email.assert_called_once()
        recipient = test_app.email_sender.send_email.call_args.args[0]
        assert recipient.value == "ursula_le_guin@gmail.com"

        links = test_app.get_confirmation_links()
        assert links.html == links.plain_text

    @pytest.mark.parametrize(
        "data, description",
        [
            ({"name": "le guin"}, "missing the email"),
            ({"email": "ursula_le_guin@gmail.com"}, "missing the name"),
            ({}, "missing both name and email"),
        ],
    )
    def test_subscribe_returns_400_when_data_is_missing(
        self, test_app: TestApp, data: dict[str, str], description: str
    ) -> None:
        """Test missing fields are a client error."""
        response = test_app.post_subscriptions(data)

        assert response.status_code == 400, description
        test_app.email_sender.send_email.assert_not_called()

    @pytest.mark.parametrize(
        "data, description",
        [
            ({"name": "", "email": "ursula_le_guin@gmail.com"}, "empty name"),
            ({"name": "Ursula", "email": ""}, "empty email"),
            ({"name": "Ursula", "email": "definitely-not-an-email"}, "invalid email"),
            ({"name": "<script>", "email": "ursula_le_guin@gmail.com"}, "forbidden characters"),
        ],
    )
    def test_subscribe_returns_400_when_fields_are_invalid(
        self, test_app: TestApp, data: dict[str, str], description: str
    ) -> None:
        """Test invalid fields are rejected and nothing is stored."""
        response = test_app.post_subscriptions(data)

        assert response.status_code == 400, description
        assert test_app.saved_subscriptions() == []

    def test_subscribe_returns_500_when_dispatch_fails(
        self, test_app: TestApp
    ) -> None:
        """Test a provider failure is a server error and the row stays pending."""
        test_app.email_sender.send_email.side_effect = DispatchError(
            "ursula_le_guin@gmail.com", "provider returned 500"
        )

        response = test_app.post_subscriptions(VALID_FORM)

        assert response.status_code == 500
        saved = test_app.saved_subscriptions()
        assert len(saved) == 1
        assert saved[0]["status"] == SubscriptionStatus.PENDING_CONFIRMATION

    def test_subscribe_twice_with_same_email_returns_500(self, test_app: TestApp) -> None:
        """Test the unique email constraint surfaces as a server error."""
        assert test_app.post_subscriptions(VALID_FORM).status_code == 200

        response = test_app.post_subscriptions(VALID_FORM)

        assert response.status_code == 500
        assert len(test_app.saved_subscriptions()) == 1
        test_app.email_sender.send_email.assert_called_once()

    def test_subscribe_returns_500_when_store_fails(self, test_app: TestApp) -> None:
        """Test a store failure is a server error and no email is sent."""
        with patch(
            "app.newsletter.presentation.api.subscriptions.SqlSubscriptionRepository"
        ) as mock_repo_class:
            mock_repo = AsyncMock()
            mock_repo.insert_pending.side_effect = StoreError("store the new subscriber")
            mock_repo_class.return_value = mock_repo

            response = test_app.post_subscriptions(VALID_FORM)

        assert response.status_code == 500
        test_app.email_sender.send_email.assert_not_called()


class TestConfirmSubscription:
    """Tests for GET /subscriptions/confirm."""

    def test_confirmations_without_token_are_rejected_with_400(
        self, test_app: TestApp
    ) -> None:
        response = test_app.get_confirmation()

        assert response.status_code == 400

    def test_malformed_token_is_rejected_with_400(self, test_app: TestApp) -> None:
        response = test_app.get_confirmation({"subscription_token": "not-a-token"})

        assert response.status_code == 400

    def test_unknown_token_is_rejected_with_401(self, test_app: TestApp) -> None:
        response = test_app.get_confirmation(
            {"subscription_token": SubscriptionToken.generate().value}
        )

        assert response.status_code == 401

    def test_link_returned_by_subscribe_returns_200(self, test_app: TestApp) -> None:
        """Test the emailed link is accepted by the confirm endpoint."""
        test_app.post_subscriptions(VALID_FORM)
        links = test_app.get_confirmation_links()

        response = test_app.follow(links.html)

        assert response.status_code == 200

    def test_clicking_on_the_confirmation_link_confirms_a_subscriber(
        self, test_app: TestApp
    ) -> None:
        """Test following the link flips the subscriber to confirmed."""
        test_app.post_subscriptions(VALID_FORM)
        links = test_app.get_confirmation_links()

        test_app.follow(links.plain_text)

        saved = test_app.saved_subscriptions()
        assert saved[0]["email"] == "ursula_le_guin@gmail.com"
        assert saved[0]["name"] == "le guin"
        assert saved[0]["status"] == SubscriptionStatus.CONFIRMED

    def test_confirming_twice_keeps_subscriber_confirmed(self, test_app: TestApp) -> None:
        """Test a second confirmation succeeds and changes nothing."""
        test_app.post_subscriptions(VALID_FORM)
        links = test_app.get_confirmation_links()

        assert test_app.follow(links.html).status_code == 200
        assert test_app.follow(links.html).status_code == 200

        assert test_app.saved_subscriptions()[0]["status"] == SubscriptionStatus.CONFIRMED

    def test_confirm_returns_500_when_store_fails(self, test_app: TestApp) -> None:
        """Test a store failure during confirmation is a server error."""
        with patch(
            "app.newsletter.presentation.api.subscriptions.SqlSubscriptionRepository"
        ) as mock_repo_class:
            mock_repo = AsyncMock()
            mock_repo.get_subscriber_id_from_token.side_effect = StoreError(
                "look up the subscription token"
            )
            mock_repo_class.return_value = mock_repo

            response = test_app.get_confirmation(
                {"subscription_token": SubscriptionToken.generate().value}
            )

        assert response.status_code == 500
