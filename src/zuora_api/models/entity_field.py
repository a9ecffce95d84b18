"""Describe-API field model"""

from typing import Optional
from pydantic import BaseModel, Field


class EntityField(BaseModel):
    """One field of an object as listed by the describe endpoint"""

    name: str = Field(..., description="Field name")
    label: Optional[str] = Field(None, description="Field label")
    custom: bool = Field(False, description="Whether the field is a custom field")
    required: bool = Field(False, description="Whether the field is required")
    type: Optional[str] = Field(None, description="Field data type")

    model_config = {
        "extra": "ignore",
    }
