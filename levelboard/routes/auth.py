"""Authentication handshake with the game server."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from levelboard.models import AuthRequest, AuthResponse
from levelboard.security import verify_api_key
from levelboard.services import upstream

router = APIRouter(prefix="/api/v1", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/auth", response_model=AuthResponse)
async def authenticate(
    request: Optional[AuthRequest] = None,
    api_key: str = Depends(verify_api_key),
) -> AuthResponse:
    """Obtain a player id and session token from the game server.

    Both values must be passed to the hall of fame and level endpoints.
    """
    request = request or AuthRequest()
    session = await upstream.authenticate(request.unique_id, request.token)
    logger.info(f"Authenticated game session for player {session.unique_id}")
    return session
