"""
SQLModel database models for properties and their reviews.
"""
from typing import Optional
from sqlmodel import Field
from .base import BaseModel


class Property(BaseModel, table=True):
    """Rental property listed by an owner."""
    __tablename__ = "properties"

    owner_id: int = Field(foreign_key="users.id", index=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    thumbnail_photo_url: Optional[str] = Field(default=None, max_length=255)
    cover_photo_url: Optional[str] = Field(default=None, max_length=255)
    cost_per_night: int = Field(default=0)  # cents
    street: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=255, index=True)
    province: Optional[str] = Field(default=None, max_length=255)
    post_code: Optional[str] = Field(default=None, max_length=255)
    country: Optional[str] = Field(default=None, max_length=255)
    parking_spaces: int = Field(default=0)
    number_of_bathrooms: int = Field(default=0)
    number_of_bedrooms: int = Field(default=0)

    def __repr__(self):
        return f"<Property(id={self.id}, title='{self.title}', city='{self.city}')>"


class PropertyReview(BaseModel, table=True):
    """Guest rating for a property. The average is computed, never stored."""
    __tablename__ = "property_reviews"

    property_id: int = Field(foreign_key="properties.id", index=True)
    guest_id: Optional[int] = Field(default=None, foreign_key="users.id")
    reservation_id: Optional[int] = Field(default=None, foreign_key="reservations.id")
    rating: int = Field(default=0)
    message: Optional[str] = Field(default=None)

    def __repr__(self):
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"
