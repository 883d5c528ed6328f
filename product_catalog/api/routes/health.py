"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from product_catalog.db.database import get_db
from product_catalog.schemas import HealthResponse


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, db: Session):
        self._db = db

    def check_database(self) -> str:
        try:
            self._db.execute(text("SELECT 1"))
            return "healthy"
        except Exception:
            return "unhealthy"

    def get_health(self) -> HealthResponse:
        database = self.check_database()
        return HealthResponse(
            status="OK" if database == "healthy" else "DEGRADED",
            message="Catalog API is running",
            database=database,
        )


@router.get("", response_model=HealthResponse)
async def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns API status plus database connectivity.
    """
    return HealthController(db).get_health()


@router.get("/ready")
async def readiness_check(db: Session = Depends(get_db)):
    """Readiness probe: ready only when the database answers."""
    ready = HealthController(db).check_database() == "healthy"
    return JSONResponse(status_code=200 if ready else 503, content={"ready": ready})


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
