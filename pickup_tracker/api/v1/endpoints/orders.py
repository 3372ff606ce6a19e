"""
Order API endpoints
"""
from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from pickup_tracker.api.deps import get_lookup_service, get_order_service, get_recycle_bin_service
from pickup_tracker.core.exceptions import PickupTrackerError
from pickup_tracker.schemas.common import SuccessResponse
from pickup_tracker.schemas.order import ApprovalResponse, OrderCreate, OrderCreated, StaffAction, StatusUpdate
from pickup_tracker.schemas.recycle_bin import SoftDeleteResponse
from pickup_tracker.services.lookup_service import LookupService
from pickup_tracker.services.order_service import OrderService
from pickup_tracker.services.recycle_bin_service import RecycleBinService

logger = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=List[Dict[str, Any]])
async def get_orders(
    q: Optional[str] = Query(None, description="Search text (name, order number, phone)"),
    status: Optional[str] = Query(None, description="Status filter; 'all' for every status"),
    order_service: OrderService = Depends(get_order_service),
    lookup_service: LookupService = Depends(get_lookup_service),
):
    """List orders, optionally filtered"""
    logger.info("Get orders request", q=q, status=status)
    if q or (status and status != "all"):
        return lookup_service.search_orders(q, status)
    return order_service.list_orders()


@router.post("", response_model=OrderCreated)
async def create_order(
    order: OrderCreate,
    order_service: OrderService = Depends(get_order_service),
):
    """Create new order"""
    logger.info("Create order request", staff=order.staff_name)

    try:
        order_number = order_service.create_order(
            order.customer_name,
            order.customer_phone,
            order.items,
            order.payment_method,
            order.staff_name,
        )
        return OrderCreated(order_number=order_number)

    except PickupTrackerError:
        raise
    except Exception as e:
        logger.error("Failed to create order", error=str(e))
        raise HTTPException(status_code=500, detail="Failed to create order")


@router.get("/{order_number}", response_model=Dict[str, Any])
async def get_order(order_number: str, order_service: OrderService = Depends(get_order_service)):
    """Order detail"""
    logger.info("Get order detail", order_number=order_number)
    return order_service.get_order(order_number)


@router.put("/{order_number}/status", response_model=SuccessResponse)
async def update_order_status(
    order_number: str,
    update: StatusUpdate,
    order_service: OrderService = Depends(get_order_service),
):
    """Update order status"""
    logger.info("Update order status", order_number=order_number, status=update.status)

    try:
        order_service.update_status(order_number, update.status, update.staff_name, update.invoice_number)
        return SuccessResponse(message=f"Status set to {update.status}")

    except PickupTrackerError:
        raise
    except Exception as e:
        logger.error("Failed to update order status", order_number=order_number, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to update order status")


@router.put("/{order_number}/approve", response_model=ApprovalResponse)
async def approve_order(
    order_number: str,
    action: StaffAction,
    order_service: OrderService = Depends(get_order_service),
):
    """Add a staff approval"""
    logger.info("Approve order", order_number=order_number, staff=action.staff_name)

    try:
        count = order_service.add_approval(order_number, action.staff_name)
        return ApprovalResponse(approvals=count)

    except PickupTrackerError:
        raise
    except Exception as e:
        logger.error("Failed to approve order", order_number=order_number, error=str(e))
        raise HTTPException(status_code=500, detail="Failed to approve order")


@router.delete("/{order_number}", response_model=SoftDeleteResponse)
async def delete_order(
    order_number: str,
    action: StaffAction,
    recycle_bin_service: RecycleBinService = Depends(get_recycle_bin_service),
):
    """Move order to the recycle bin"""
    logger.info("Delete order request", order_number=order_number, staff=action.staff_name)
    count = recycle_bin_service.soft_delete(order_number, action.staff_name)
    return SoftDeleteResponse(recycle_bin_count=count)
