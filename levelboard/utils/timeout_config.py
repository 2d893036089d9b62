"""Centralized timeout configuration for calls to the legacy proxy."""
import httpx


def get_upstream_timeout():
    """Get an httpx timeout configuration from the upstream settings."""
    from config import settings

    return httpx.Timeout(
        connect=settings.upstream_connect_timeout,
        read=settings.upstream_timeout,
        write=settings.upstream_write_timeout,
        pool=5.0
    )


def get_upstream_client(transport=None):
    """Get an httpx.AsyncClient with the upstream timeouts."""
    return httpx.AsyncClient(timeout=get_upstream_timeout(), transport=transport)
