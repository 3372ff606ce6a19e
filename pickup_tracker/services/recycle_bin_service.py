"""
Recycle bin: soft delete, restore, permanent delete and age-based purge

Lock order for operations touching both stores is always
orders store first, then recycle bin store.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import structlog

from pickup_tracker.core.clock import Clock, parse_iso, to_iso, utc_now
from pickup_tracker.core.exceptions import ExportError, NotFoundError, ValidationError
from pickup_tracker.db.json_store import JsonListStore
from pickup_tracker.models.audit import AuditAction
from pickup_tracker.models.order import SYSTEM_STAFF, DeletedOrder
from pickup_tracker.services.audit_log import AuditLog
from pickup_tracker.services.export_service import (
    REASON_AUTO_CLEANUP,
    REASON_PERMANENT_DELETE,
    SnapshotExporter,
)
from pickup_tracker.services.order_service import find_index, load_order, require_text

logger = structlog.get_logger()

RECYCLE_BIN = "recycle_bin"


class RecycleBinService:
    def __init__(
        self,
        orders_store: JsonListStore,
        deleted_store: JsonListStore,
        audit_log: AuditLog,
        exporter: SnapshotExporter,
        retention_days: int = 7,
        warning_days: int = 5,
        clock: Clock = utc_now,
    ):
        self.orders_store = orders_store
        self.deleted_store = deleted_store
        self.audit_log = audit_log
        self.exporter = exporter
        self.retention = timedelta(days=retention_days)
        self.warning = timedelta(days=warning_days)
        self.clock = clock

    def soft_delete(self, order_number: str, staff_name: str) -> int:
        """Move an order into the recycle bin and return the bin size"""
        staff_name = require_text(staff_name, "staffName")
        with self.orders_store.transaction() as orders, self.deleted_store.transaction() as deleted:
            index = find_index(orders, order_number)
            if index == -1:
                raise NotFoundError(order_number)

            order = load_order(orders[index])
            del orders[index]
            entry = DeletedOrder.from_order(order, deleted_at=to_iso(self.clock()), deleted_by=staff_name)
            deleted.append(entry.to_record())
            count = len(deleted)

        self.audit_log.append(
            AuditAction.ORDER_DELETED, order_number, staff_name, f"Moved to recycle bin (was {order.status})"
        )
        logger.info("Order moved to recycle bin", order_number=order_number, staff=staff_name, bin_count=count)
        return count

    def list_deleted(self) -> List[Dict[str, Any]]:
        return self.deleted_store.read()

    def restore(self, order_number: str, staff_name: Optional[str] = None) -> Dict[str, Any]:
        """Move an order back to the active store with its pre-deletion status"""
        with self.orders_store.transaction() as orders, self.deleted_store.transaction() as deleted:
            index = find_index(deleted, order_number)
            if index == -1:
                raise NotFoundError(order_number, store=RECYCLE_BIN)
            if find_index(orders, order_number) != -1:
                raise ValidationError(f"Order {order_number} is already active", detail=order_number)

            order = load_order(deleted[index], DeletedOrder).to_order()
            del deleted[index]
            orders.append(order.to_record())

        self.audit_log.append(
            AuditAction.ORDER_RESTORED, order_number, staff_name or SYSTEM_STAFF, f"Restored as {order.status}"
        )
        logger.info("Order restored", order_number=order_number, status=order.status)
        return order.to_record()

    def permanently_delete(self, order_number: str, staff_name: str) -> Optional[str]:
        """Export a snapshot, then drop the order; returns the export file name or None"""
        staff_name = require_text(staff_name, "staffName")
        with self.deleted_store.transaction() as deleted:
            index = find_index(deleted, order_number)
            if index == -1:
                raise NotFoundError(order_number, store=RECYCLE_BIN)

            record = deleted.pop(index)
            export_file = self._export(record, REASON_PERMANENT_DELETE)

        self.audit_log.append(
            AuditAction.ORDER_PERMANENTLY_DELETED,
            order_number,
            staff_name,
            f"Exported to {export_file}" if export_file else "Export failed",
        )
        logger.info("Order permanently deleted", order_number=order_number, staff=staff_name, export_file=export_file)
        return export_file

    def get_stats(self) -> Dict[str, int]:
        """Bin size and how many entries are within two days of the purge"""
        now = self.clock()
        deleted = self.deleted_store.read()
        expiring_soon = 0
        for record in deleted:
            age = self._age(record, now)
            if age is not None and age >= self.warning:
                expiring_soon += 1
        return {"total": len(deleted), "expiring_soon": expiring_soon}

    def auto_cleanup(self) -> List[str]:
        """Purge entries older than the retention period; returns the purged order numbers"""
        now = self.clock()
        purged = []

        with self.deleted_store.transaction() as deleted:
            kept = []
            for record in deleted:
                age = self._age(record, now)
                if age is None or age < self.retention:
                    kept.append(record)
                    continue
                export_file = self._export(record, REASON_AUTO_CLEANUP)
                purged.append((record.get("order_number"), export_file))
            deleted[:] = kept

        for order_number, export_file in purged:
            self.audit_log.append(
                AuditAction.AUTO_CLEANUP,
                order_number,
                SYSTEM_STAFF,
                f"Purged after {self.retention.days} days; exported to {export_file}"
                if export_file else f"Purged after {self.retention.days} days; export failed",
            )

        logger.info("Recycle bin cleanup finished", purged=len(purged), kept=len(kept))
        return [order_number for order_number, _ in purged]

    def _export(self, record: Dict[str, Any], reason: str) -> Optional[str]:
        # losing the snapshot is preferred over blocking the deletion
        try:
            return self.exporter.export(record, reason)
        except ExportError as e:
            logger.warning("Export failed; deleting anyway", order_number=record.get("order_number"), error=e.detail)
            return None

    def _age(self, record: Dict[str, Any], now: datetime) -> Optional[timedelta]:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        try:
            return now - parse_iso(record["deleted_at"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Recycle bin entry has no usable deleted_at", order_number=record.get("order_number"))
            return None
