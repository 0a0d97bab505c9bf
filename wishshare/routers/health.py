"""Health check endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from wishshare.dependencies import StoreDep

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    users: int
    wishlists: int
    items: int
    shares: int


@router.get("/healthz", response_model=HealthResponse)
def health_check(store: StoreDep) -> HealthResponse:
    """Check application health and report store sizes."""
    return HealthResponse(status="healthy", **store.stats())


@router.get("/ready")
async def readiness_check() -> dict[str, str]:
    """Kubernetes readiness probe endpoint."""
    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe endpoint."""
    return {"status": "alive"}
