"""Level browser endpoints."""
import logging
from datetime import datetime

from fastapi import APIRouter, Depends

from levelboard.models import LevelListResponse, LevelListResult, LevelSearchRequest, RawPayloadRequest
from levelboard.parsing import decode_level_list
from levelboard.security import verify_api_key
from levelboard.services import upstream

router = APIRouter(prefix="/api/v1/levels", tags=["levels"])
logger = logging.getLogger(__name__)


def _to_response(result: LevelListResult, page: int = 1) -> LevelListResponse:
    return LevelListResponse(
        levels=result.levels,
        has_more_levels=result.has_more_levels,
        count=len(result.levels),
        page=page,
        timestamp=datetime.utcnow().isoformat(),
    )


@router.post("/search", response_model=LevelListResponse)
async def search_levels(request: LevelSearchRequest, api_key: str = Depends(verify_api_key)) -> LevelListResponse:
    """Fetch one page of levels from the game server.

    An empty ``difficulty`` means no filter. ``hasMoreLevels`` tells the
    caller whether ``page + 1`` exists.
    """
    logger.info(
        f"Level search: sort={request.sort_by}, page={request.page}, "
        f"difficulty='{request.difficulty}', filter='{request.search_filter}'"
    )
    result = await upstream.search_levels(request)
    return _to_response(result, request.page)


@router.post("/decode", response_model=LevelListResponse)
async def decode_levels(request: RawPayloadRequest, api_key: str = Depends(verify_api_key)) -> LevelListResponse:
    """Decode a raw level list body without contacting the game server."""
    return _to_response(decode_level_list(request.raw))
