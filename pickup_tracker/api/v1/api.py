"""
API v1 router
"""
from fastapi import APIRouter

from pickup_tracker.api.v1.endpoints import audit, auth, dashboard, lookup, orders, recycle_bin

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(lookup.router, tags=["lookup"])
api_router.include_router(dashboard.router, tags=["dashboard"])
api_router.include_router(recycle_bin.router, prefix="/recycle-bin", tags=["recycle-bin"])
api_router.include_router(audit.router, prefix="/audit", tags=["audit"])
