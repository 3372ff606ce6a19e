"""
Order request/response schemas
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderCreate(BaseModel):
    """Order creation payload (required fields are checked by the service)"""
    model_config = ConfigDict(populate_by_name=True)

    customer_name: Optional[str] = Field(None, alias="customerName", description="Customer name")
    customer_phone: Optional[str] = Field(None, alias="customerPhone", description="Customer phone")
    items: Optional[List[Any]] = Field(None, description="Ordered line items (opaque)")
    payment_method: Optional[str] = Field(None, alias="paymentMethod", description="Payment method")
    staff_name: Optional[str] = Field(None, alias="staffName", description="Creating staff member")


class OrderCreated(BaseModel):
    success: bool = True
    order_number: str


class StatusUpdate(BaseModel):
    """Status change payload"""
    model_config = ConfigDict(populate_by_name=True)

    status: Optional[str] = Field(None, description="New status")
    staff_name: Optional[str] = Field(None, alias="staffName", description="Acting staff member")
    invoice_number: Optional[str] = Field(None, alias="invoiceNumber", description="Invoice number")


class StaffAction(BaseModel):
    """Payload carrying only the acting staff member"""
    model_config = ConfigDict(populate_by_name=True)

    staff_name: Optional[str] = Field(None, alias="staffName", description="Acting staff member")


class ApprovalResponse(BaseModel):
    success: bool = True
    approvals: int


class OrderStats(BaseModel):
    total: int
    received: int
    approved: int
    packed: int
    ready: int
    completed: int
    today: int


class CustomerLookupResponse(BaseModel):
    found: bool
    order: Optional[Dict[str, Any]] = None
