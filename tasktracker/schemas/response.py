#tasktracker/schemas/response.py
from pydantic import BaseModel, Field
from typing import Any, Optional

class ErrorDetail(BaseModel):
    """
    ErrorDetail: machine-readable kind plus a human-readable message.
    """
    code: str = Field(..., examples=["validation_error"])
    message: str = Field(..., examples=["Task title is required"])
    details: Optional[Any] = None

class ErrorResponse(BaseModel):
    """
    ErrorResponse: body of every error response. `detail` mirrors the message
    for clients expecting FastAPI's default shape.
    """
    detail: str
    error: ErrorDetail
