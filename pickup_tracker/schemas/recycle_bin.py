"""
Recycle bin schemas
"""
from typing import List, Optional

from pydantic import BaseModel


class SoftDeleteResponse(BaseModel):
    success: bool = True
    recycle_bin_count: int


class PermanentDeleteResponse(BaseModel):
    success: bool = True
    export_file: Optional[str] = None


class RecycleBinStats(BaseModel):
    total: int
    expiring_soon: int


class CleanupResponse(BaseModel):
    success: bool = True
    purged: List[str]
