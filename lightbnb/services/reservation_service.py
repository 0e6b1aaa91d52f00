import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.core.config import settings
from lightbnb.core.exceptions import translate_errors

logger = logging.getLogger(__name__)

# reservations.id stays "id"; the property is reachable through property_id
GUEST_RESERVATIONS_SQL = text(
    """
    SELECT reservations.id, reservations.guest_id, reservations.property_id,
           reservations.start_date, reservations.end_date,
           properties.owner_id, properties.title, properties.description,
           properties.thumbnail_photo_url, properties.cover_photo_url,
           properties.cost_per_night, properties.street, properties.city,
           properties.province, properties.post_code, properties.country,
           properties.parking_spaces, properties.number_of_bathrooms,
           properties.number_of_bedrooms,
           avg(property_reviews.rating) AS average_rating
    FROM reservations
    JOIN properties ON reservations.property_id = properties.id
    JOIN property_reviews ON properties.id = property_reviews.property_id
    WHERE reservations.guest_id = :guest_id
    GROUP BY properties.id, reservations.id
    ORDER BY reservations.start_date ASC
    LIMIT :limit
    """
)


class ReservationService:
    """Read access to a guest's reservations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_reservations(self, guest_id: Any, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Get all reservations for a single guest, earliest stay first.

        Each row carries the reserved property's columns and its average rating.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of rows, defaults to DEFAULT_RESULT_LIMIT

        Returns:
            List of reservation records, empty when the guest has none
        """
        if limit is None:
            limit = settings.DEFAULT_RESULT_LIMIT

        try:
            guest_id = int(guest_id)
        except (TypeError, ValueError):
            logger.warning(f"Non-numeric guest id {guest_id!r} cannot match any reservation")
            return []

        async with translate_errors("get_all_reservations"):
            result = await self.db.execute(
                GUEST_RESERVATIONS_SQL,
                {"guest_id": guest_id, "limit": int(limit)}
            )
            return [dict(row) for row in result.mappings().all()]
