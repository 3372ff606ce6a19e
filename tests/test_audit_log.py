from pickup_tracker.models.audit import AuditAction
from pickup_tracker.services.audit_log import AuditLog


def test_new_log_has_header(audit_log):
    assert audit_log.export() == "timestamp,action,order_id,staff_name,details\n"


def test_append_defaults_to_na_and_system(audit_log):
    row = audit_log.append(AuditAction.AUTO_CLEANUP, details="nightly")

    assert row["order_id"] == "N/A"
    assert row["staff_name"] == "SYSTEM"
    assert row["timestamp"] == "2026-10-19T10:00:00.000Z"


def test_details_with_separators_and_quotes_survive(audit_log):
    details = 'Customer: "Big" Joe, Colombo\nline two'
    audit_log.append(AuditAction.ORDER_CREATED, "WHS-001", "staff1", details)

    entries = audit_log.entries()
    assert len(entries) == 1
    assert entries[0]["details"] == details
    assert entries[0]["order_id"] == "WHS-001"


def test_append_never_rewrites_previous_lines(audit_log):
    audit_log.append(AuditAction.ORDER_CREATED, "WHS-001", "staff1", "first")
    before = audit_log.export()
    audit_log.append(AuditAction.STATUS_UPDATE, "WHS-001", "staff2", "second")

    assert audit_log.export().startswith(before)
    assert [e["action"] for e in audit_log.entries()] == ["ORDER_CREATED", "STATUS_UPDATE"]


def test_append_creates_missing_log(tmp_path, clock):
    log = AuditLog(tmp_path / "sub" / "audit.csv", clock=clock)
    log.append("CUSTOM", "WHS-009", "me", "x")

    assert log.export().splitlines()[0] == "timestamp,action,order_id,staff_name,details"
    assert log.entries()[0]["action"] == "CUSTOM"
