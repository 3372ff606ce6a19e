"""
Append-only audit log (CSV)
"""
import csv
import io
import threading
from pathlib import Path
from typing import Dict, List, Optional, Union

import structlog

from pickup_tracker.core.clock import Clock, to_iso, utc_now
from pickup_tracker.core.exceptions import StorageError
from pickup_tracker.models.audit import AUDIT_HEADER, NO_ORDER, AuditAction
from pickup_tracker.models.order import SYSTEM_STAFF

logger = structlog.get_logger()


class AuditLog:
    """One CSV row per action; rows are never rewritten"""

    def __init__(self, path: Path, clock: Clock = utc_now):
        self.path = Path(path)
        self.clock = clock
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Create the log with its header row"""
        with self._lock:
            if self.path.exists():
                return
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.path, "w", encoding="utf-8", newline="") as f:
                    csv.writer(f, lineterminator="\n").writerow(AUDIT_HEADER)
            except OSError as e:
                raise StorageError("Audit log could not be created", detail=str(e)) from e

    def append(
        self,
        action: Union[AuditAction, str],
        order_number: Optional[str] = None,
        staff_name: Optional[str] = None,
        details: str = "",
    ) -> Dict[str, str]:
        """Append one audit record and return it"""
        action_tag = action.value if isinstance(action, AuditAction) else str(action)
        row = {
            "timestamp": to_iso(self.clock()),
            "action": action_tag,
            "order_id": order_number or NO_ORDER,
            "staff_name": staff_name or SYSTEM_STAFF,
            "details": details or "",
        }

        if not self.path.exists():
            self.initialize()

        with self._lock:
            try:
                with open(self.path, "a", encoding="utf-8", newline="") as f:
                    writer = csv.DictWriter(f, fieldnames=AUDIT_HEADER, lineterminator="\n")
                    writer.writerow(row)
            except OSError as e:
                logger.error("Failed to append audit record", action=action_tag, error=str(e))
                raise StorageError("Audit log could not be written", detail=str(e)) from e

        return row

    def export(self) -> str:
        """Full log content, verbatim"""
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            logger.error("Failed to export audit log", path=str(self.path), error=str(e))
            raise StorageError("Failed to export audit log", detail=str(e)) from e

    def entries(self) -> List[Dict[str, str]]:
        """Parsed audit records, oldest first"""
        return list(csv.DictReader(io.StringIO(self.export())))
