"""
Pydantic schemas for property input and search options.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PropertyCreate(BaseModel):
    """Schema for a new property row. Missing fields are stored as NULL."""
    owner_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: Optional[float] = Field(default=None, allow_inf_nan=False)  # dollars
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None


class PropertySearchOptions(BaseModel):
    """Optional filters for the property search. Unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")

    city: Optional[str] = None  # quote-wrapped, e.g. "'Vancouver'"
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = Field(default=None, allow_inf_nan=False)  # dollars
    maximum_price_per_night: Optional[float] = Field(default=None, allow_inf_nan=False)  # dollars
    minimum_rating: Optional[float] = Field(default=None, allow_inf_nan=False)

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # Form fields arrive as empty strings when left blank
        if isinstance(value, str) and not value.strip():
            return None
        return value
