"""
Domain errors raised by stores and services
"""


class PickupTrackerError(Exception):
    """Base class for all domain errors"""

    status_code = 500

    def __init__(self, message: str, detail: str = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFoundError(PickupTrackerError):
    """Unknown order number in the targeted store"""

    status_code = 404

    def __init__(self, order_number: str, store: str = "orders"):
        super().__init__(f"Order {order_number} not found", detail=store)
        self.order_number = order_number
        self.store = store


class ValidationError(PickupTrackerError):
    """Missing or malformed input"""

    status_code = 400


class DuplicateApprovalError(PickupTrackerError):
    """Same staff member approving an order twice"""

    status_code = 409

    def __init__(self, order_number: str, staff_name: str):
        super().__init__(
            "Staff member already approved this order",
            detail=f"{staff_name} on {order_number}",
        )
        self.order_number = order_number
        self.staff_name = staff_name


class StorageError(PickupTrackerError):
    """Underlying read/write failure"""

    status_code = 500


class ExportError(PickupTrackerError):
    """Snapshot export failed; never blocks a deletion"""

    status_code = 500
