"""Base model class for all database models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class DBModel(BaseModel):
    """Base model for all database models."""

    id: Optional[str] = Field(None, description="Opaque row identifier")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    class Config:
        """Pydantic config."""

        from_attributes = True

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        """Accept UUID and integer keys as opaque strings."""
        if v is None or isinstance(v, str):
            return v
        return str(v)
