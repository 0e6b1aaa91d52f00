"""
Property search and insertion.

The search statement is assembled from a fixed table of filters evaluated
in order; only the filters present in the options contribute a condition.
"""
import logging
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Optional, Union

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.core.config import settings
from lightbnb.core.exceptions import translate_errors
from lightbnb.helpers.query_builder import BuiltQuery, QueryBuilder, dollars_to_cents, strip_wrapping
from lightbnb.schemas.properties import PropertyCreate, PropertySearchOptions

logger = logging.getLogger(__name__)

PROPERTY_SEARCH_BASE = """
    SELECT properties.*, avg(property_reviews.rating) AS average_rating
    FROM properties
    JOIN property_reviews ON properties.id = property_reviews.property_id
"""

# Insert order of the columns accepted by add_property
PROPERTY_FIELDS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

INSERT_PROPERTY_SQL = text(
    "INSERT INTO properties ({columns}) VALUES ({placeholders}) RETURNING *".format(
        columns=", ".join(PROPERTY_FIELDS),
        placeholders=", ".join(":" + name for name in PROPERTY_FIELDS),
    )
)


class PropertyFilter(NamedTuple):
    option: str
    condition: str
    convert: Callable[[Any], Any]


def _city_pattern(city: str) -> str:
    return f"%{strip_wrapping(city)}%"


WHERE_FILTERS = (
    PropertyFilter("city", "properties.city LIKE {}", _city_pattern),
    PropertyFilter("owner_id", "properties.owner_id = {}", int),
    PropertyFilter("minimum_price_per_night", "properties.cost_per_night >= {}", dollars_to_cents),
    PropertyFilter("maximum_price_per_night", "properties.cost_per_night <= {}", dollars_to_cents),
)

HAVING_FILTERS = (
    PropertyFilter("minimum_rating", "avg(property_reviews.rating) >= {}", float),
)


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def build_property_search(
    options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
    limit: Optional[int] = None,
) -> BuiltQuery:
    """
    Build the filtered property search statement.

    Args:
        options: Search filters; absent or blank filters are skipped
        limit: Maximum number of rows, defaults to DEFAULT_RESULT_LIMIT

    Returns:
        The statement and its bind values
    """
    if not isinstance(options, PropertySearchOptions):
        options = PropertySearchOptions.model_validate(options or {})
    if limit is None:
        limit = settings.DEFAULT_RESULT_LIMIT

    query = QueryBuilder(PROPERTY_SEARCH_BASE)
    for item in WHERE_FILTERS:
        value = getattr(options, item.option)
        if _is_present(value):
            query.where(item.condition, item.convert(value))

    query.group_by("properties.id", "property_reviews.property_id")

    for item in HAVING_FILTERS:
        value = getattr(options, item.option)
        if _is_present(value):
            query.having(item.condition, item.convert(value))

    query.order_by("properties.cost_per_night ASC")
    query.limit(limit)
    return query.build()


class PropertyService:
    """Search and insert operations for the properties table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return properties matching the options, cheapest first, with their average rating."""
        query = build_property_search(options, limit)
        logger.debug(f"Property search: {query.sql} {query.positional_params}")

        async with translate_errors("get_all_properties"):
            result = await self.db.execute(query.statement, query.params)
            return [dict(row) for row in result.mappings().all()]

    async def add_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Add a property.

        Args:
            property_data: Property details; cost_per_night is given in dollars

        Returns:
            The created property record, with cost_per_night in cents

        Raises:
            ConstraintViolationError: If owner_id is unknown or a required column is missing
        """
        if not isinstance(property_data, PropertyCreate):
            property_data = PropertyCreate.model_validate(property_data)

        values = {name: getattr(property_data, name) for name in PROPERTY_FIELDS}
        if values["cost_per_night"] is not None:
            values["cost_per_night"] = dollars_to_cents(values["cost_per_night"])

        async with translate_errors("add_property"):
            try:
                result = await self.db.execute(INSERT_PROPERTY_SQL, values)
                new_property = dict(result.mappings().one())
                await self.db.commit()
            except Exception:
                await self.db.rollback()
                raise

        logger.info(f"Property added: {new_property['title']} (ID: {new_property['id']}, owner: {new_property['owner_id']})")
        return new_property
