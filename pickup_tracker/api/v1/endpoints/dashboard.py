"""
Dashboard endpoints
"""
import structlog
from fastapi import APIRouter, Depends, HTTPException

from pickup_tracker.api.deps import get_order_service
from pickup_tracker.core.exceptions import PickupTrackerError
from pickup_tracker.schemas.order import OrderStats
from pickup_tracker.services.order_service import OrderService

logger = structlog.get_logger()

router = APIRouter()


@router.get("/stats", response_model=OrderStats)
async def get_dashboard_stats(order_service: OrderService = Depends(get_order_service)):
    """Order counts per status and orders created today"""
    logger.info("Get dashboard stats request")

    try:
        stats = order_service.compute_stats()
        logger.info("Dashboard stats retrieved successfully", total_orders=stats["total"], today=stats["today"])
        return stats

    except PickupTrackerError:
        raise
    except Exception as e:
        logger.error("Failed to get dashboard stats", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to get dashboard stats")
