# dna4bit/schemas/common.py
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SchemaBase(BaseModel):
    """Response payloads are read-only once built."""
    model_config = ConfigDict(frozen=True)


class APIError(SchemaBase):
    code: str = Field(..., description="Machine-readable error code (e.g. INVALID_LOCATION)")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[Dict[str, Any]] = Field(default=None, description="Optional structured detail")


class ErrorResponse(SchemaBase):
    error: APIError
