from .base import BaseModel
from .users import User
from .properties import Property, PropertyReview
from .reservations import Reservation

__all__ = ["BaseModel", "User", "Property", "PropertyReview", "Reservation"]
