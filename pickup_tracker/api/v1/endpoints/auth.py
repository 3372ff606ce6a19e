"""
Staff login endpoint
"""
import structlog
from fastapi import APIRouter, Depends, Request

from pickup_tracker.api.deps import get_auth_service
from pickup_tracker.schemas.common import LoginRequest
from pickup_tracker.services.auth_service import AuthService

logger = structlog.get_logger()

router = APIRouter()


@router.post("/login")
async def login(
    credentials: LoginRequest,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Check staff credentials against the configured user table"""
    username = credentials.username.strip()
    client_host = request.client.host if request.client else None

    if auth_service.login(username, credentials.password):
        logger.info("Login succeeded", username=username, client=client_host)
        return {"success": True, "username": username, "message": f"Welcome, {username}!"}

    logger.warning("Login failed", username=username or None, client=client_host)
    return {"success": False, "message": "Invalid username or password"}
