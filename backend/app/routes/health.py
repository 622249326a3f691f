"""
Storefront API — Liveness & Info Routes
=========================================

What:  GET /, GET /health and GET /info.
Why:   Cheap endpoints for load balancers, uptime probes and humans.

The store has no external dependency that can fail, so there is nothing to
probe: if the process answers, it is healthy.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.schemas.system import InfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Root liveness check",
    description="Returns the plain-text string 'Root OK'.",
)
async def root() -> str:
    return "Root OK"


@router.get(
    "/health",
    response_model=str,
    summary="Service health check",
    description="Returns the JSON string \"OK\" while the service is running.",
)
async def health_check() -> str:
    return "OK"


@router.get(
    "/info",
    response_model=InfoResponse,
    summary="Application name and version",
)
async def info() -> InfoResponse:
    """Report the configured application name and version (APP_NAME / APP_VERSION)."""
    return InfoResponse(app=settings.app_name, version=settings.app_version)
