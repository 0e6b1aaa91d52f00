"""
SQLModel database model for reservations.
"""
from datetime import date
from sqlmodel import Field
from .base import BaseModel


class Reservation(BaseModel, table=True):
    """A guest's stay at a property."""
    __tablename__ = "reservations"

    guest_id: int = Field(foreign_key="users.id", index=True)
    property_id: int = Field(foreign_key="properties.id", index=True)
    start_date: date
    end_date: date

    def __repr__(self):
        return f"<Reservation(id={self.id}, guest_id={self.guest_id}, start_date={self.start_date})>"
