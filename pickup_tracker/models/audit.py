"""
Audit log vocabulary
"""
from enum import Enum

AUDIT_HEADER = ["timestamp", "action", "order_id", "staff_name", "details"]
NO_ORDER = "N/A"


class AuditAction(str, Enum):
    ORDER_CREATED = "ORDER_CREATED"
    STATUS_UPDATE = "STATUS_UPDATE"
    APPROVAL_ADDED = "APPROVAL_ADDED"
    ORDER_DELETED = "ORDER_DELETED"
    ORDER_RESTORED = "ORDER_RESTORED"
    ORDER_PERMANENTLY_DELETED = "ORDER_PERMANENTLY_DELETED"
    AUTO_CLEANUP = "AUTO_CLEANUP"
    LOGIN = "LOGIN"
    LOGIN_FAILED = "LOGIN_FAILED"
