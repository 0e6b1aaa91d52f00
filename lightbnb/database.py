"""
Function surface of the data-access layer.

Each call borrows a session from the process-wide pool, runs one
operation and releases the connection.
"""
from typing import Any, Dict, List, Mapping, Optional, Union

from lightbnb.core import database as db
from lightbnb.schemas import PropertyCreate, PropertySearchOptions, UserCreate
from lightbnb.services.property_service import PropertyService
from lightbnb.services.reservation_service import ReservationService
from lightbnb.services.user_service import UserService


async def get_user_with_email(email: str) -> Optional[Dict[str, Any]]:
    async with db.async_session_maker() as session:
        return await UserService(session).get_user_with_email(email)


async def get_user_with_id(user_id: Any) -> Optional[Dict[str, Any]]:
    async with db.async_session_maker() as session:
        return await UserService(session).get_user_with_id(user_id)


async def add_user(user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
    async with db.async_session_maker() as session:
        return await UserService(session).add_user(user)


async def get_all_reservations(guest_id: Any, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    async with db.async_session_maker() as session:
        return await ReservationService(session).get_all_reservations(guest_id, limit)


async def get_all_properties(
    options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    async with db.async_session_maker() as session:
        return await PropertyService(session).get_all_properties(options, limit)


async def add_property(property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Dict[str, Any]:
    async with db.async_session_maker() as session:
        return await PropertyService(session).add_property(property_data)
