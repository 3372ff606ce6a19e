"""
Snapshot export written before an order leaves the recycle bin for good
"""
import json
from pathlib import Path
from typing import Any, Dict

import structlog

from pickup_tracker.core.clock import Clock, to_iso, utc_now
from pickup_tracker.core.exceptions import ExportError

logger = structlog.get_logger()

REASON_PERMANENT_DELETE = "permanent_delete"
REASON_AUTO_CLEANUP = "auto_cleanup"


class SnapshotExporter:
    def __init__(self, exports_dir: Path, clock: Clock = utc_now):
        self.exports_dir = Path(exports_dir)
        self.clock = clock

    def export(self, order: Dict[str, Any], reason: str) -> str:
        """Write an immutable snapshot and return its file name"""
        now = self.clock()
        order_number = str(order.get("order_number", "unknown"))
        snapshot = {
            "order": order,
            "exported_at": to_iso(now),
            "reason": reason,
        }

        try:
            self.exports_dir.mkdir(parents=True, exist_ok=True)
            path = self._unique_path(order_number, now.strftime("%Y%m%dT%H%M%S%f"))
            # "x" refuses to overwrite an existing snapshot
            with open(path, "x", encoding="utf-8") as f:
                json.dump(snapshot, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Snapshot export failed", order_number=order_number, reason=reason, error=str(e))
            raise ExportError(f"Export of {order_number} failed", detail=str(e)) from e

        logger.info("Snapshot exported", order_number=order_number, reason=reason, file=path.name)
        return path.name

    def _unique_path(self, order_number: str, stamp: str) -> Path:
        safe_number = "".join(c if c.isalnum() or c in "-_" else "_" for c in order_number)
        path = self.exports_dir / f"{safe_number}_{stamp}.json"
        counter = 1
        while path.exists():
            path = self.exports_dir / f"{safe_number}_{stamp}_{counter}.json"
            counter += 1
        return path
