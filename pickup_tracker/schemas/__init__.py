# Pydantic API schemas
from .order import (
    OrderCreate, OrderCreated, StatusUpdate, StaffAction, ApprovalResponse, OrderStats, CustomerLookupResponse,
)
from .recycle_bin import SoftDeleteResponse, PermanentDeleteResponse, RecycleBinStats, CleanupResponse
from .common import SuccessResponse, ErrorResponse, LoginRequest

__all__ = [
    "OrderCreate", "OrderCreated", "StatusUpdate", "StaffAction", "ApprovalResponse", "OrderStats",
    "CustomerLookupResponse",
    "SoftDeleteResponse", "PermanentDeleteResponse", "RecycleBinStats", "CleanupResponse",
    "SuccessResponse", "ErrorResponse", "LoginRequest",
]
