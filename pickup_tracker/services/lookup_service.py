"""
Staff search and customer self-service lookup (linear scans)
"""
from typing import Any, Dict, List, Optional

import structlog

from pickup_tracker.db.json_store import JsonListStore

logger = structlog.get_logger()

# the only fields a customer may see
PUBLIC_FIELDS = ("order_number", "status", "invoice_number", "payment_method", "created_at")


def digits_only(value: str) -> str:
    return "".join(c for c in (value or "") if c.isdigit())


def phone_matches(phone: str, query: str) -> bool:
    phone = phone or ""
    if query in phone:
        return True
    # order numbers contain digits too; only phone-like queries get normalized
    if any(c.isalpha() for c in query):
        return False
    query_digits = digits_only(query)
    return bool(query_digits) and query_digits in digits_only(phone)


def public_view(order: Dict[str, Any]) -> Dict[str, Any]:
    return {field: order.get(field) for field in PUBLIC_FIELDS}


class LookupService:
    def __init__(self, orders_store: JsonListStore):
        self.orders_store = orders_store

    def search_orders(self, query: Optional[str] = None, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Filter by text (name, order number, phone) and status; 'all' disables the status filter"""
        orders = self.orders_store.read()

        if query:
            needle = query.strip().lower()
            orders = [
                order for order in orders
                if needle in str(order.get("customer_name") or "").lower()
                or needle in str(order.get("order_number") or "").lower()
                or phone_matches(str(order.get("customer_phone") or ""), query.strip())
            ]

        if status and status != "all":
            orders = [order for order in orders if order.get("status") == status]

        return orders

    def customer_lookup(self, query: Optional[str]) -> Dict[str, Any]:
        """Exact order number or phone fragment; returns only the public view"""
        query = (query or "").strip()
        if not query:
            return {"found": False}

        for order in self.orders_store.read():
            if str(order.get("order_number") or "").lower() == query.lower() or phone_matches(
                str(order.get("customer_phone") or ""), query
            ):
                logger.info("Customer lookup hit", order_number=order.get("order_number"))
                return {"found": True, "order": public_view(order)}

        return {"found": False}
