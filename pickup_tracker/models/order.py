"""
Order records as persisted in the JSON stores
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    RECEIVED = "received"
    APPROVED = "approved"
    PACKED = "packed"
    READY = "ready"
    COMPLETED = "completed"


SYSTEM_STAFF = "SYSTEM"


class Approval(BaseModel):
    """One staff sign-off"""
    staff: Optional[str] = None
    timestamp: Optional[str] = None


class StatusHistoryEntry(BaseModel):
    """One status change"""
    status: Optional[str] = None
    timestamp: Optional[str] = None
    staff: Optional[str] = None


class Order(BaseModel):
    """
    Active pickup order.

    Only order_number is mandatory: records written by earlier versions may
    lack any other key, and line items are opaque.
    """

    # unknown keys written by older versions are carried through untouched
    model_config = ConfigDict(extra="allow")

    order_number: str
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    items: List[Any] = Field(default_factory=list)
    payment_method: Optional[str] = None
    invoice_number: Optional[str] = ""
    status: Optional[str] = OrderStatus.RECEIVED.value
    created_at: Optional[str] = None
    created_by: Optional[str] = None
    approvals: List[Approval] = Field(default_factory=list)
    status_history: List[StatusHistoryEntry] = Field(default_factory=list)

    def has_approval_from(self, staff_name: str) -> bool:
        return any(approval.staff == staff_name for approval in self.approvals)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


DELETION_FIELDS = ("deleted_at", "deleted_by", "original_status")


class DeletedOrder(Order):
    """Order held in the recycle bin"""

    deleted_at: Optional[str] = None
    deleted_by: Optional[str] = None
    original_status: Optional[str] = None

    @classmethod
    def from_order(cls, order: Order, deleted_at: str, deleted_by: str) -> "DeletedOrder":
        record = order.to_record()
        record.update(deleted_at=deleted_at, deleted_by=deleted_by, original_status=order.status)
        return cls.model_validate(record)

    def to_order(self) -> Order:
        """Strip deletion metadata and bring back the saved status"""
        record = self.to_record()
        for field in DELETION_FIELDS:
            record.pop(field, None)
        record["status"] = self.original_status or OrderStatus.RECEIVED.value
        return Order.model_validate(record)
