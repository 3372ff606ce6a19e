"""
Order lifecycle: creation, status changes, approvals, stats
"""
import json
from datetime import datetime
from typing import Any, Dict, List, Optional, Type

import pydantic
import structlog

from pickup_tracker.core.clock import Clock, to_iso, utc_now
from pickup_tracker.core.exceptions import DuplicateApprovalError, NotFoundError, StorageError, ValidationError
from pickup_tracker.db.json_store import JsonListStore
from pickup_tracker.models.audit import AuditAction
from pickup_tracker.models.order import (
    SYSTEM_STAFF,
    Approval,
    Order,
    OrderStatus,
    StatusHistoryEntry,
)
from pickup_tracker.services.audit_log import AuditLog
from pickup_tracker.services.order_numbers import OrderNumberPolicy, SequentialOrderNumbers

logger = structlog.get_logger()


def require_text(value: Any, field: str) -> str:
    """Reject missing or blank string input"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required", detail=field)
    return value.strip()


def find_index(records: List[Dict[str, Any]], order_number: str) -> int:
    for index, record in enumerate(records):
        if record.get("order_number") == order_number:
            return index
    return -1


def load_order(record: Dict[str, Any], model: Type[Order] = Order) -> Order:
    """Parse a stored record; a record that cannot be parsed is a storage fault"""
    try:
        return model.model_validate(record)
    except pydantic.ValidationError as e:
        order_number = record.get("order_number") if isinstance(record, dict) else None
        logger.error("Stored order record is malformed", order_number=order_number, error=str(e))
        raise StorageError(f"Order record {order_number} is malformed", detail=str(e)) from e


class OrderService:
    def __init__(
        self,
        orders_store: JsonListStore,
        deleted_store: JsonListStore,
        audit_log: AuditLog,
        number_policy: OrderNumberPolicy = None,
        required_approvals: int = 3,
        clock: Clock = utc_now,
        sequence_store: Optional[JsonListStore] = None,
    ):
        self.orders_store = orders_store
        self.deleted_store = deleted_store
        self.audit_log = audit_log
        self.number_policy = number_policy or SequentialOrderNumbers()
        self.required_approvals = required_approvals
        self.clock = clock
        self.sequence_store = sequence_store

    def create_order(
        self,
        customer_name: str,
        customer_phone: str,
        items: List[Any],
        payment_method: str,
        staff_name: str,
    ) -> str:
        """Create a new order in `received` and return its order number"""
        customer_name = require_text(customer_name, "customerName")
        customer_phone = require_text(customer_phone, "customerPhone")
        payment_method = require_text(payment_method, "paymentMethod")
        staff_name = require_text(staff_name, "staffName")
        if not isinstance(items, list) or not items:
            raise ValidationError("items must be a non-empty list", detail="items")
        try:
            json.dumps(items)
        except (TypeError, ValueError) as e:
            raise ValidationError("items must be JSON values", detail="items") from e

        now = self.clock()
        timestamp = to_iso(now)

        with self.orders_store.transaction() as orders:
            # numbers parked in the recycle bin stay reserved for restore
            in_use = [record.get("order_number") for record in orders]
            in_use.extend(record.get("order_number") for record in self.deleted_store.read())
            order_number = self._allocate_number(in_use, now)

            order = Order(
                order_number=order_number,
                customer_name=customer_name,
                customer_phone=customer_phone,
                items=items,
                payment_method=payment_method,
                invoice_number="",
                status=OrderStatus.RECEIVED.value,
                created_at=timestamp,
                created_by=staff_name,
                approvals=[],
                status_history=[
                    StatusHistoryEntry(status=OrderStatus.RECEIVED.value, timestamp=timestamp, staff=staff_name)
                ],
            )
            orders.append(order.to_record())

        self.audit_log.append(AuditAction.ORDER_CREATED, order_number, staff_name, f"Customer: {customer_name}")
        logger.info("Order created", order_number=order_number, staff=staff_name)
        return order_number

    def _allocate_number(self, in_use: List[str], now: datetime) -> str:
        # the high-water mark keeps purged numbers from being handed out again
        if self.sequence_store is None:
            return self.number_policy.next_number(in_use, now)

        scope = self.number_policy.scope(now)
        with self.sequence_store.transaction() as marks:
            mark = next((row for row in marks if row.get("scope") == scope), None)
            floor = int(mark.get("last") or 0) if mark else 0
            order_number = self.number_policy.next_number(in_use, now, floor=floor)
            sequence = self.number_policy.sequence_of(order_number, now)
            if mark is None:
                marks.append({"scope": scope, "last": sequence})
            else:
                mark["last"] = sequence
        return order_number


    def list_orders(self) -> List[Dict[str, Any]]:
        return self.orders_store.read()

    def get_order(self, order_number: str) -> Dict[str, Any]:
        for record in self.orders_store.read():
            if record.get("order_number") == order_number:
                return record
        raise NotFoundError(order_number)

    def update_status(
        self,
        order_number: str,
        status: str,
        staff_name: str,
        invoice_number: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Set the status (no transition graph) and record it in the history"""
        status = require_text(status, "status")
        staff_name = require_text(staff_name, "staffName")

        with self.orders_store.transaction() as orders:
            index = find_index(orders, order_number)
            if index == -1:
                raise NotFoundError(order_number)

            order = load_order(orders[index])
            order.status = status
            if invoice_number:
                order.invoice_number = invoice_number
            order.status_history.append(
                StatusHistoryEntry(status=status, timestamp=to_iso(self.clock()), staff=staff_name)
            )
            orders[index] = order.to_record()

        self.audit_log.append(AuditAction.STATUS_UPDATE, order_number, staff_name, f"Status: {status}")
        logger.info("Order status updated", order_number=order_number, status=status, staff=staff_name)
        return orders[index]

    def add_approval(self, order_number: str, staff_name: str) -> int:
        """Record one staff approval; promotes `received` orders once the threshold is met"""
        staff_name = require_text(staff_name, "staffName")

        with self.orders_store.transaction() as orders:
            index = find_index(orders, order_number)
            if index == -1:
                raise NotFoundError(order_number)

            order = load_order(orders[index])
            if order.has_approval_from(staff_name):
                raise DuplicateApprovalError(order_number, staff_name)

            timestamp = to_iso(self.clock())
            order.approvals.append(Approval(staff=staff_name, timestamp=timestamp))

            promoted = False
            if len(order.approvals) >= self.required_approvals and order.status == OrderStatus.RECEIVED.value:
                order.status = OrderStatus.APPROVED.value
                order.status_history.append(
                    StatusHistoryEntry(status=OrderStatus.APPROVED.value, timestamp=timestamp, staff=SYSTEM_STAFF)
                )
                promoted = True

            orders[index] = order.to_record()
            count = len(order.approvals)

        self.audit_log.append(
            AuditAction.APPROVAL_ADDED, order_number, staff_name, f"Approval {count}/{self.required_approvals}"
        )
        logger.info("Approval added", order_number=order_number, staff=staff_name, approvals=count, promoted=promoted)
        return count

    def compute_stats(self) -> Dict[str, int]:
        """Counts per status plus orders created today (UTC date)"""
        orders = self.orders_store.read()
        today = to_iso(self.clock())[:10]

        stats = {"total": len(orders)}
        for status in OrderStatus:
            stats[status.value] = sum(1 for o in orders if o.get("status") == status.value)
        stats["today"] = sum(1 for o in orders if str(o.get("created_at") or "")[:10] == today)
        return stats
