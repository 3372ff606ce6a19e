"""
Shared schemas
"""
from typing import Optional

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Success response"""
    success: bool = True
    message: str = "Operation completed successfully"


class ErrorResponse(BaseModel):
    """Error response"""
    success: bool = False
    message: str
    detail: Optional[str] = None


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""
