"""
Search and customer self-service lookup endpoints
"""
from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Depends, Query

from pickup_tracker.api.deps import get_lookup_service
from pickup_tracker.schemas.order import CustomerLookupResponse
from pickup_tracker.services.lookup_service import LookupService

logger = structlog.get_logger()

router = APIRouter()


@router.get("/search", response_model=List[Dict[str, Any]])
async def search_orders(
    q: Optional[str] = Query(None, description="Customer name, order number or phone"),
    status: Optional[str] = Query(None, description="Status filter; 'all' for every status"),
    lookup_service: LookupService = Depends(get_lookup_service),
):
    """Staff order search"""
    logger.info("Search orders request", q=q, status=status)
    return lookup_service.search_orders(q, status)


@router.get("/customer-lookup", response_model=CustomerLookupResponse)
async def customer_lookup(
    q: Optional[str] = Query(None, description="Order number or phone number"),
    lookup_service: LookupService = Depends(get_lookup_service),
):
    """Customer order tracking; only public fields are returned"""
    return lookup_service.customer_lookup(q)
