"""
Common DTO
==========

Response envelope shared by every endpoint:
{ success, data?, message, validationErrors? }
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[DataT]):
    """Successful response envelope."""
    success: bool = True
    data: DataT
    message: str


class ErrorResponse(CamelModel):
    """Error response envelope."""
    success: bool = False
    message: str
    validation_errors: Optional[List[str]] = Field(
        None, description="Field-level problems, when the request body was malformed"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": 'Company with name "TechCorp" already exists',
            }
        }
    )

    def to_content(self) -> dict:
        """Serialize for a JSONResponse body."""
        return self.model_dump(by_alias=True, exclude_none=True)
