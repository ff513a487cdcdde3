"""HTTP email provider client for transactional messages.

Sends a single POST to ``{base_url}/email`` per message, authenticated
with the ``X-Provider-Token`` header. There is no retry.
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import SecretStr

from app.newsletter.application.exceptions import DispatchError
from app.newsletter.application.interfaces.email_sender import EmailSender
from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "X-Provider-Token"

# Default timeout for HTTP requests
DEFAULT_TIMEOUT_SECONDS = 10.0


class EmailClient(EmailSender):
    """Email provider client implementing the EmailSender interface.

    Attributes:
        _client: httpx AsyncClient for making HTTP requests.
        _base_url: Provider API base URL.
        _sender: Address every message is sent from.
    """

    def __init__(
        self,
        base_url: str,
        sender: SubscriberEmail,
        authorization_token: SecretStr,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the email client.

        Args:
            base_url: Provider API base URL.
            sender: Validated address the messages come from.
            authorization_token: Secret sent with every request.
            timeout: Bound on the whole request/response cycle, in seconds.
            transport: Optional httpx transport, mainly for tests.
        """
        self._base_url = base_url.rstrip("/")
        self._sender = sender
        self._authorization_token = authorization_token
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def sender(self) -> SubscriberEmail:
        return self._sender

    def __repr__(self) -> str:
        return f"EmailClient(base_url={self._base_url!r}, sender={self._sender.value!r})"

    async def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> None:
        """Hand a message to the provider.

        Raises:
            DispatchError: On timeout, transport failure or a non-2xx response.
        """
        payload = {
            "from": self._sender.value,
            "to": recipient.value,
            "subject": subject,
            "html_body": html_body,
            "text_body": text_body,
        }

        try:
            # httpx only bounds each phase; this bounds the whole exchange
            async with asyncio.timeout(self._timeout):
                response = await self._client.post(
                    "/email",
                    headers={
                        AUTHORIZATION_HEADER: self._authorization_token.get_secret_value(),
                    },
                    json=payload,
                )
            response.raise_for_status()
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.error(f"Timeout sending email to {recipient}")
            raise DispatchError(recipient.value, "request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Email provider error: {e.response.status_code} - {e.response.text}"
            )
            raise DispatchError(
                recipient.value, f"provider returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to reach email provider: {e}")
            raise DispatchError(recipient.value, "provider unreachable") from e

        logger.debug(f"Email provider accepted message for {recipient}")

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "EmailClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
