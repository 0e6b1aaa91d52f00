from sqlmodel import SQLModel, Field
from typing import Optional


class BaseModel(SQLModel):
    """Base model class with the shared integer primary key"""
    id: Optional[int] = Field(default=None, primary_key=True)
