"""FastAPI dependencies shared by the API routers."""

from fastapi import Request

from app.newsletter.application.interfaces.email_sender import EmailSender


def get_email_sender(request: Request) -> EmailSender:
    """Return the email client created at application startup."""
    return request.app.state.email_sender
