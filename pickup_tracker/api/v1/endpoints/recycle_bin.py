"""
Recycle bin endpoints
"""
from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Depends

from pickup_tracker.api.deps import get_cleanup_scheduler, get_recycle_bin_service
from pickup_tracker.schemas.common import SuccessResponse
from pickup_tracker.schemas.order import StaffAction
from pickup_tracker.schemas.recycle_bin import CleanupResponse, PermanentDeleteResponse, RecycleBinStats
from pickup_tracker.services.cleanup_scheduler import CleanupScheduler
from pickup_tracker.services.recycle_bin_service import RecycleBinService

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def list_deleted_orders(recycle_bin_service: RecycleBinService = Depends(get_recycle_bin_service)):
    """Orders currently in the recycle bin"""
    return recycle_bin_service.list_deleted()


@router.get("/stats", response_model=RecycleBinStats)
async def get_recycle_bin_stats(recycle_bin_service: RecycleBinService = Depends(get_recycle_bin_service)):
    return recycle_bin_service.get_stats()


@router.get("/cleanup/status")
async def get_cleanup_status(cleanup_scheduler: CleanupScheduler = Depends(get_cleanup_scheduler)):
    """Cleanup scheduler state"""
    return cleanup_scheduler.get_status()


@router.post("/cleanup", response_model=CleanupResponse)
async def run_cleanup(cleanup_scheduler: CleanupScheduler = Depends(get_cleanup_scheduler)):
    """Purge expired entries now"""
    logger.info("Manual cleanup request")
    purged = cleanup_scheduler.run_now(trigger="manual")
    return CleanupResponse(purged=purged)


@router.post("/{order_number}/restore", response_model=SuccessResponse)
async def restore_order(
    order_number: str,
    action: Optional[StaffAction] = None,
    recycle_bin_service: RecycleBinService = Depends(get_recycle_bin_service),
):
    """Move an order back to the active list"""
    staff_name = action.staff_name if action else None
    logger.info("Restore order request", order_number=order_number, staff=staff_name)
    restored = recycle_bin_service.restore(order_number, staff_name)
    return SuccessResponse(message=f"Order {order_number} restored as {restored['status']}")


@router.delete("/{order_number}", response_model=PermanentDeleteResponse)
async def permanently_delete_order(
    order_number: str,
    action: StaffAction,
    recycle_bin_service: RecycleBinService = Depends(get_recycle_bin_service),
):
    """Export a snapshot and remove the order for good"""
    logger.info("Permanent delete request", order_number=order_number, staff=action.staff_name)
    export_file = recycle_bin_service.permanently_delete(order_number, action.staff_name)
    return PermanentDeleteResponse(export_file=export_file)
