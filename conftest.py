"""
Shared fixtures: an in-memory SQLite database with the LightBnB schema.
"""
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from lightbnb.core.database import init_db
from lightbnb.models import Property, PropertyReview, Reservation, User


# Test database setup
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


def make_property(owner_id: int, title: str, city: str, cost_per_night: int) -> Property:
    return Property(
        owner_id=owner_id,
        title=title,
        description="description",
        thumbnail_photo_url=f"https://images.example.com/{title}/thumb.jpg",
        cover_photo_url=f"https://images.example.com/{title}/cover.jpg",
        cost_per_night=cost_per_night,
        street="1 Main St",
        city=city,
        province="BC",
        post_code="V5K 0A1",
        country="Canada",
        parking_spaces=1,
        number_of_bathrooms=1,
        number_of_bedrooms=2,
    )


@pytest.fixture
async def seeded(db_session):
    """
    Two owners, one guest, four reviewed properties and one without reviews.

    Returns a dict of the created rows keyed by a short name.
    """
    owner_a = User(name="Owner A", email="owner.a@example.com", password="hash-a")
    owner_b = User(name="Owner B", email="owner.b@example.com", password="hash-b")
    guest = User(name="Guest", email="guest@example.com", password="hash-g")
    db_session.add_all([owner_a, owner_b, guest])
    await db_session.flush()

    # costs are stored in cents
    vancouver_cheap = make_property(owner_a.id, "Cheap Loft", "Vancouver", 5000)
    vancouver_pricey = make_property(owner_b.id, "Harbour Suite", "North Vancouver", 30000)
    calgary = make_property(owner_a.id, "Prairie House", "Calgary", 12000)
    toronto = make_property(owner_b.id, "Tower Condo", "Toronto", 8000)
    unreviewed = make_property(owner_a.id, "Unreviewed Cabin", "Vancouver", 1000)
    db_session.add_all([vancouver_cheap, vancouver_pricey, calgary, toronto, unreviewed])
    await db_session.flush()

    reviews = [
        PropertyReview(property_id=vancouver_cheap.id, guest_id=guest.id, rating=2),
        PropertyReview(property_id=vancouver_cheap.id, guest_id=guest.id, rating=3),
        PropertyReview(property_id=vancouver_pricey.id, guest_id=guest.id, rating=5),
        PropertyReview(property_id=calgary.id, guest_id=guest.id, rating=4),
        PropertyReview(property_id=calgary.id, guest_id=guest.id, rating=5),
        PropertyReview(property_id=toronto.id, guest_id=guest.id, rating=1),
    ]
    db_session.add_all(reviews)

    reservations = [
        Reservation(guest_id=guest.id, property_id=calgary.id,
                    start_date=date(2024, 6, 1), end_date=date(2024, 6, 5)),
        Reservation(guest_id=guest.id, property_id=vancouver_cheap.id,
                    start_date=date(2023, 1, 10), end_date=date(2023, 1, 12)),
        Reservation(guest_id=guest.id, property_id=toronto.id,
                    start_date=date(2025, 3, 2), end_date=date(2025, 3, 9)),
        Reservation(guest_id=guest.id, property_id=vancouver_pricey.id,
                    start_date=date(2023, 8, 20), end_date=date(2023, 8, 22)),
        Reservation(guest_id=owner_a.id, property_id=toronto.id,
                    start_date=date(2022, 2, 2), end_date=date(2022, 2, 3)),
    ]
    db_session.add_all(reservations)
    await db_session.commit()

    return {
        "owner_a": owner_a,
        "owner_b": owner_b,
        "guest": guest,
        "vancouver_cheap": vancouver_cheap,
        "vancouver_pricey": vancouver_pricey,
        "calgary": calgary,
        "toronto": toronto,
        "unreviewed": unreviewed,
    }
