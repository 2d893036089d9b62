"""System endpoints such as status and root."""
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter

from config import settings
from levelboard.constants import API_VERSION, SERVICE_NAME
from levelboard.services import upstream

router = APIRouter(tags=["system"])


@router.get("/api/v1/status", response_model=Dict[str, Any])
async def api_status() -> Dict[str, Any]:
    """Service status, including which proxy it talks to and the hall of fame cache state."""
    return {
        "success": True,
        "status": "online",
        "timestamp": datetime.utcnow().isoformat(),
        "version": API_VERSION,
        "upstream": {
            "base_url": settings.upstream_base_url,
            "timeout": settings.upstream_timeout,
        },
        "hof_cache": {
            "enabled": settings.hof_cache_ttl > 0,
            "ttl": settings.hof_cache_ttl,
            "entries": len(upstream.hof_cache),
        },
    }


@router.get("/", response_model=Dict[str, Any])
async def root() -> Dict[str, Any]:
    """Root endpoint."""
    return {
        "success": True,
        "message": SERVICE_NAME,
        "version": API_VERSION,
        "docs": "/docs",
        "status": "/api/v1/status",
    }


@router.get("/health", response_model=Dict[str, Any])
async def health_check() -> Dict[str, Any]:
    """Health check endpoint expected by hosting environments."""
    return {
        "success": True,
        "status": "healthy",
        "message": "healthy",
        "timestamp": datetime.utcnow().isoformat(),
        "service": SERVICE_NAME,
    }
