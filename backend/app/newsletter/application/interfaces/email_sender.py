"""Email sender interface for transactional messages."""

from abc import ABC, abstractmethod

from app.newsletter.domain.value_objects.subscriber_email import SubscriberEmail


class EmailSender(ABC):
    """Abstract base class for email delivery providers.

    Sending only hands the message to the provider; it does not
    guarantee delivery to the recipient's inbox.
    """

    @abstractmethod
    async def send_email(
        self,
        recipient: SubscriberEmail,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> None:
        """Send a single message to ``recipient``.

        Args:
            recipient: Validated recipient address.
            subject: Subject line.
            html_body: HTML version of the message.
            text_body: Plain-text version of the message.

        Raises:
            DispatchError: If the provider could not be reached, timed out
                or rejected the message.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        ...
