"""
Request and response models for the tracker API.
Fields are snake_case in Python and camelCase on the wire.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileDescriptor(CamelModel):
    name: str
    type: Optional[str] = None
    size: Optional[int] = None

    @field_validator('size')
    @classmethod
    def size_must_not_be_negative(cls, v):
        if v is not None and v < 0:
            raise ValueError('size cannot be negative')
        return v


class ExtractRequest(CamelModel):
    """Document submission; presence and values are checked by the extraction stage."""
    text: Optional[str] = None
    document_type: Optional[str] = None
    files: Optional[List[FileDescriptor]] = None


class LinkRequest(CamelModel):
    adjustments: Optional[List[Dict[str, Any]]] = None
    evidence: Optional[List[Dict[str, Any]]] = None


class ReviewRequest(CamelModel):
    adjustment_id: Optional[str] = None
    evidence_id: Optional[str] = None
    status: Optional[str] = None


class SummaryRequest(CamelModel):
    student_id: Optional[str] = None


class LinkResponse(BaseModel):
    success: bool
    links: List[Dict[str, Any]]
    message: str


class ReviewResponse(BaseModel):
    success: bool
    message: str


class HealthResponse(BaseModel):
    status: str
    version: str
    adjustments: int
    evidence: int
    links: int


class ResetResponse(BaseModel):
    success: bool
    cleared: Dict[str, int]
