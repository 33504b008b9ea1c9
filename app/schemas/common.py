"""
Common Schemas - Response envelopes and the camelCase base model
"""
import re
from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from atams.schemas import DataResponse, PaginationResponse, ResponseBase

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class BulkResponse(ResponseBase, Generic[T]):
    """
    Outcome of a bulk operation

    Always returned with HTTP 200; callers inspect `failed` for partial failure.
    """
    processed: int = Field(description="Number of input items")
    successful: int = Field(description="Number of items that succeeded")
    failed: int = Field(description="Number of items that failed")
    results: List[T] = Field(default_factory=list, description="Created/updated records in input order")
    errors: List[Dict[str, Any]] = Field(default_factory=list, description="Failed items tagged with their key")


def normalize_pg_datetime(v: Any) -> Any:
    """
    Fix datetime timezone format from PostgreSQL
    PostgreSQL returns: '2025-10-01 09:17:39.587802+00'
    Pydantic expects: '2025-10-01 09:17:39.587802+00:00'
    """
    if v == '' or v is None:
        return None

    if isinstance(v, str) and re.search(r'([+-]\d{2})$', v):
        v = v + ':00'

    return v


__all__ = [
    "CamelModel",
    "BulkResponse",
    "DataResponse",
    "PaginationResponse",
    "ResponseBase",
    "normalize_pg_datetime",
]
