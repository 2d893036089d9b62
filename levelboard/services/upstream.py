"""Client for the legacy game-server proxy.

This is the transport side of the decoders: it issues the requests, turns
every non-success outcome into an ``HTTPException`` and only hands bodies
from successful responses to :mod:`levelboard.parsing`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from cachetools import TTLCache
from fastapi import HTTPException
from pydantic import ValidationError

from config import settings
from levelboard.models import AuthResponse, HofResult, LevelListResult, LevelSearchRequest
from levelboard.parsing import decode_hof, decode_level_list
from levelboard.utils.timeout_config import get_upstream_client

logger = logging.getLogger(__name__)

# Decoded hall of fame pages keyed by (unique_id, token, page)
hof_cache: TTLCache = TTLCache(maxsize=64, ttl=max(settings.hof_cache_ttl, 1))


def _upstream_url(path: str) -> str:
    return f"{settings.upstream_base_url.rstrip('/')}/{path.lstrip('/')}"


async def _post(path: str, payload: Dict[str, Any]) -> httpx.Response:
    """POST JSON to the proxy, mapping transport failures to HTTP errors."""
    url = _upstream_url(path)
    logger.info(f"Upstream POST {url}")
    try:
        async with get_upstream_client() as client:
            response = await client.post(url, json=payload)
            response.raise_for_status()
            return response
    except httpx.HTTPStatusError as exc:
        status_code = exc.response.status_code
        logger.error(f"Upstream HTTP error: {status_code} for {url}")
        if status_code == 404:
            raise HTTPException(status_code=404, detail=f"Resource not found ({path})")
        raise HTTPException(status_code=502, detail=f"Game server request failed ({status_code} {path})")
    except httpx.TimeoutException:
        logger.error(f"Upstream timeout for {url}")
        raise HTTPException(status_code=504, detail=f"Game server timed out ({path})")
    except httpx.RequestError as exc:
        logger.error(f"Upstream request error for {url}: {type(exc).__name__}: {exc}")
        raise HTTPException(status_code=502, detail=f"Game server unreachable ({path})")


def _session_payload(unique_id: Optional[str], token: Optional[str]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    if unique_id is not None:
        payload["uniqueId"] = unique_id
    if token is not None:
        payload["token"] = token
    return payload


async def authenticate(unique_id: Optional[str] = None, token: Optional[str] = None) -> AuthResponse:
    """Run the proxy's authentication handshake."""
    response = await _post(settings.upstream_auth_path, _session_payload(unique_id, token))
    try:
        return AuthResponse.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        logger.warning(f"Unexpected authentication payload: {exc}")
        raise HTTPException(status_code=502, detail="Invalid authentication response from game server")


async def fetch_hall_of_fame(unique_id: str, token: str, page: int = 1) -> str:
    """Fetch the raw hall of fame body."""
    payload = _session_payload(unique_id, token)
    payload["page"] = page
    response = await _post(settings.upstream_hof_path, payload)
    return response.text


async def fetch_level_list(request: LevelSearchRequest) -> str:
    """Fetch one raw level list page."""
    payload = _session_payload(request.unique_id, request.token)
    payload.update(
        {
            "sortBy": request.sort_by,
            "page": request.page,
            # sent verbatim, an empty filter must stay ""
            "difficulty": request.difficulty,
            "searchFilter": request.search_filter,
            "withThumbnails": request.with_thumbnails,
        }
    )
    response = await _post(settings.upstream_levels_path, payload)
    return response.text


async def get_hall_of_fame(unique_id: str, token: str, page: int = 1) -> HofResult:
    """Fetch and decode a hall of fame page, served from cache when fresh."""
    use_cache = settings.hof_cache_ttl > 0
    cache_key = (unique_id, token, page)
    if use_cache and cache_key in hof_cache:
        logger.info(f"Hall of fame page {page} served from cache")
        return hof_cache[cache_key]

    result = decode_hof(await fetch_hall_of_fame(unique_id, token, page))
    logger.info(f"Decoded {len(result.rows)} hall of fame rows for page {page}")

    if use_cache:
        hof_cache[cache_key] = result
    return result


async def search_levels(request: LevelSearchRequest) -> LevelListResult:
    """Fetch and decode one page of the level browser."""
    result = decode_level_list(await fetch_level_list(request))
    logger.info(
        f"Decoded {len(result.levels)} levels for page {request.page} "
        f"(sort={request.sort_by}, has_more={result.has_more_levels})"
    )
    return result
