"""
Error response body
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class ErrorResponse(BaseModel):
    """Body returned for every handled error"""
    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
    details: Optional[List[str]] = None
