"""
Schemas for the field data form ("Record Data" tab).
"""

from datetime import date
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


class CropType(str, Enum):
    MAIZE = "Maize"
    BEANS = "Beans"
    POTATOES = "Potatoes"
    WHEAT = "Wheat"
    RICE = "Rice"


class FieldRecordForm(BaseModel):
    """
    One field observation entered by the farmer.

    Numeric fields arrive as text from the form; blank means not measured.
    """

    soil_ph: Optional[float] = Field(default=None, ge=0, le=14)
    soil_moisture: Optional[float] = Field(default=None, ge=0, le=100)
    crop: CropType = CropType.MAIZE
    planting_date: date = Field(default_factory=date.today)
    has_disease: bool = False
    notes: str = ""

    @field_validator("soil_ph", "soil_moisture", mode="before")
    @classmethod
    def blank_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RecordSubmission(BaseModel):
    ok: bool
    message: str
    errors: Dict[str, str] = Field(default_factory=dict)
