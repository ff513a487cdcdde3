# FastAPI routers - health, subscriptions
from app.newsletter.presentation.api import health, subscriptions

__all__ = ["health", "subscriptions"]
