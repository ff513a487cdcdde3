"""Data Transfer Objects for subscription requests.

Fields are kept as raw strings; validation happens in the domain value
objects so that invalid input maps to a 400 rather than a 422.
"""

from pydantic import BaseModel, Field


class SubscribeRequest(BaseModel):
    """Raw data submitted through the subscription form."""

    name: str = Field(description="Subscriber display name")
    email: str = Field(description="Address that will receive the newsletter")


class ConfirmSubscriptionRequest(BaseModel):
    """Raw data received from a confirmation link."""

    subscription_token: str = Field(description="Token from the confirmation email")
