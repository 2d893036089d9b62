"""Hall of fame endpoints."""
import logging
from datetime import datetime

from fastapi import APIRouter, Depends

from levelboard.models import HofRequest, HofResponse, HofResult, RawPayloadRequest
from levelboard.parsing import decode_hof
from levelboard.security import verify_api_key
from levelboard.services import upstream

router = APIRouter(prefix="/api/v1/hof", tags=["hall-of-fame"])
logger = logging.getLogger(__name__)


def _to_response(result: HofResult, page: int = 1) -> HofResponse:
    return HofResponse(
        data=result.rows,
        count=len(result.rows),
        page=page,
        timestamp=datetime.utcnow().isoformat(),
    )


@router.post("", response_model=HofResponse)
async def get_hall_of_fame(request: HofRequest, api_key: str = Depends(verify_api_key)) -> HofResponse:
    """Fetch the hall of fame from the game server and return ranked rows.

    Rows are sorted by score, highest first. Tied scores share a rank and the
    next distinct score skips ahead (1st, 2nd, 2nd, 4th).
    """
    logger.info(f"Hall of fame requested: page={request.page}")
    result = await upstream.get_hall_of_fame(request.unique_id, request.token, request.page)
    return _to_response(result, request.page)


@router.post("/decode", response_model=HofResponse)
async def decode_hall_of_fame(request: RawPayloadRequest, api_key: str = Depends(verify_api_key)) -> HofResponse:
    """Decode a raw hall of fame body without contacting the game server."""
    return _to_response(decode_hof(request.raw))
