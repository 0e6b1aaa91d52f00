from .users import UserCreate
from .properties import PropertyCreate, PropertySearchOptions

__all__ = ["UserCreate", "PropertyCreate", "PropertySearchOptions"]
