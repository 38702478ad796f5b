"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_api.catalog import ProductStore
from product_api.core.dependencies import get_product_store


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: ProductStore):
        self._store = store

    def get_health(self) -> dict:
        """Get full health status."""
        return {
            "status": "healthy",
            "components": {
                "api": "healthy",
                "store": "healthy"
            },
            "details": {
                "products_loaded": len(self._store)
            }
        }


@router.get("")
async def health_check(store: ProductStore = Depends(get_product_store)):
    """
    Health check endpoint.

    Returns system status including API and product store.
    """
    controller = HealthController(store)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
