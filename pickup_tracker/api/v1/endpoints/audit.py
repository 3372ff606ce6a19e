"""
Audit log export endpoint
"""
import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from pickup_tracker.api.deps import get_audit_log
from pickup_tracker.services.audit_log import AuditLog

logger = structlog.get_logger()

router = APIRouter()


@router.get("/export")
async def export_audit_log(audit_log: AuditLog = Depends(get_audit_log)):
    """Download the audit log as CSV"""
    logger.info("Audit export request")
    content = audit_log.export()
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=audit_log.csv"},
    )
