# Persisted record models
from .order import Order, DeletedOrder, Approval, StatusHistoryEntry, OrderStatus, SYSTEM_STAFF
from .audit import AuditAction, AUDIT_HEADER, NO_ORDER

__all__ = [
    "Order", "DeletedOrder", "Approval", "StatusHistoryEntry", "OrderStatus", "SYSTEM_STAFF",
    "AuditAction", "AUDIT_HEADER", "NO_ORDER",
]
