"""Liveness endpoint."""

from fastapi import APIRouter

from klarna_checkout.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "default_region": settings.default_region,
        "client": "mock" if settings.use_mock_client else "klarna",
    }
