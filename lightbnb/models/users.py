"""
SQLModel database model for users.
"""
from sqlmodel import Field
from .base import BaseModel


class User(BaseModel, table=True):
    """User model for the database."""
    __tablename__ = "users"

    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=255)  # stored exactly as supplied

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}' name='{self.name}')>"
