"""Health check endpoint."""

from fastapi import APIRouter, Response, status

router = APIRouter()


@router.get("/health_check", status_code=status.HTTP_200_OK)
async def health_check() -> Response:
    """Report that the application is up.

    Returns:
        An empty 200 response.
    """
    return Response(status_code=status.HTTP_200_OK)
