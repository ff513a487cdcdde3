"""Application-layer exceptions for use case error handling.

These exceptions represent failures that can occur during use case
execution. They are designed to be caught and mapped to appropriate
HTTP responses by the presentation layer. Input validation failures are
raised as the domain ``ValidationError``.
"""


class ApplicationError(Exception):
    """Base class for all application-layer exceptions."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class StoreError(ApplicationError):
    """Raised when the subscription store cannot complete an operation."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            message=f"Failed to {operation}",
            code="STORE_ERROR"
        )
        self.operation = operation


class DispatchError(ApplicationError):
    """Raised when the email provider does not accept a message.

    Covers transport failures, timeouts and non-2xx responses.
    """

    def __init__(self, recipient: str, reason: str) -> None:
        super().__init__(
            message=f"Failed to send email to {recipient}: {reason}",
            code="DISPATCH_ERROR"
        )
        self.recipient = recipient
        self.reason = reason


class AuthorizationError(ApplicationError):
    """Raised when a confirmation token is not associated with any subscriber."""

    def __init__(self) -> None:
        super().__init__(
            message="Unknown subscription token",
            code="UNKNOWN_SUBSCRIPTION_TOKEN"
        )
