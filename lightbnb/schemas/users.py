"""
Pydantic schemas for user input.
"""
from pydantic import BaseModel


class UserCreate(BaseModel):
    """Schema for a new user row."""
    name: str
    email: str
    password: str
