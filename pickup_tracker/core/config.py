"""
Application settings
"""
from pathlib import Path
from typing import Dict

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    # Application info
    APP_NAME: str = "Hardware Pickup Tracker API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Storage (relative paths resolve under DATA_DIR)
    DATA_DIR: Path = Field(default=Path("."), description="Directory holding all data files")
    ORDERS_FILE: str = "orders.json"
    DELETED_ORDERS_FILE: str = "deleted_orders.json"
    AUDIT_LOG_FILE: str = "audit_log.csv"
    EXPORTS_DIR: str = "exports"
    CLEANUP_STATE_FILE: str = "cleanup_state.json"
    ORDER_SEQUENCE_FILE: str = "order_sequence.json"

    # Order numbers
    ORDER_NUMBER_PREFIX: str = "WHS"
    ORDER_NUMBER_SCHEME: str = Field(
        default="sequential",
        description="sequential (WHS-001) or date_coded (WHS-<day><month>-<seq>)"
    )

    # Lifecycle policy
    REQUIRED_APPROVALS: int = 3
    RECYCLE_BIN_RETENTION_DAYS: int = 7
    RECYCLE_BIN_WARNING_DAYS: int = 5

    # Cleanup job
    CLEANUP_SCHEDULER_ENABLED: bool = True
    CLEANUP_TIME: str = "02:00"
    CLEANUP_POLL_SECONDS: int = Field(default=30, ge=1, le=60)

    # Staff credentials: username -> bcrypt hash
    STAFF_USERS: Dict[str, str] = Field(default_factory=dict)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def resolve(self, name: str) -> Path:
        """Resolve a data file name against DATA_DIR"""
        path = Path(name)
        if path.is_absolute():
            return path
        return Path(self.DATA_DIR) / path

    @property
    def orders_path(self) -> Path:
        return self.resolve(self.ORDERS_FILE)

    @property
    def deleted_orders_path(self) -> Path:
        return self.resolve(self.DELETED_ORDERS_FILE)

    @property
    def audit_log_path(self) -> Path:
        return self.resolve(self.AUDIT_LOG_FILE)

    @property
    def exports_path(self) -> Path:
        return self.resolve(self.EXPORTS_DIR)

    @property
    def cleanup_state_path(self) -> Path:
        return self.resolve(self.CLEANUP_STATE_FILE)

    @property
    def order_sequence_path(self) -> Path:
        return self.resolve(self.ORDER_SEQUENCE_FILE)


def get_settings() -> Settings:
    """Load settings from the environment"""
    return Settings()
