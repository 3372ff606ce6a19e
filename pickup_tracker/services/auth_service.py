"""
Staff credential check against the static user table
"""
from typing import Dict, Optional

import bcrypt
import structlog

from pickup_tracker.models.audit import AuditAction
from pickup_tracker.services.audit_log import AuditLog

logger = structlog.get_logger()


def hash_password(password: str) -> str:
    """bcrypt hash suitable for the STAFF_USERS setting"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


class AuthService:
    def __init__(self, users: Dict[str, str], audit_log: Optional[AuditLog] = None):
        self.users = dict(users or {})
        self.audit_log = audit_log

    def verify(self, username: str, password: str) -> bool:
        """True when username exists and password matches its bcrypt hash"""
        hashed = self.users.get((username or "").strip())
        if not hashed or password is None:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed", username=username)
            return False

    def login(self, username: str, password: str) -> bool:
        """verify() plus an audit record of the attempt"""
        ok = self.verify(username, password)
        if self.audit_log:
            self.audit_log.append(
                AuditAction.LOGIN if ok else AuditAction.LOGIN_FAILED,
                None,
                username or None,
                "Login succeeded" if ok else "Invalid credentials",
            )
        if ok:
            logger.info("Staff login", username=username)
        else:
            logger.warning("Failed login attempt", username=username)
        return ok
