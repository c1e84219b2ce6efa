"""
Pytest fixtures for test database, client, and authentication.

Uses a throwaway database (in-memory SQLite unless TEST_DATABASE_URL is set)
with tables created and dropped per test for isolation.
"""

import os
from typing import AsyncGenerator

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
# Must be set before app settings are first read
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("ENVIRONMENT", "test")

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.db.base import Base  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.core.security import create_access_token, hash_password  # noqa: E402
from app.models import (  # noqa: E402
    Booking, Hotel, Payment, Room, Session, Ticket, TicketStatus, TicketType, User,
)

if TEST_DATABASE_URL.startswith("sqlite"):
    # One shared connection so every session sees the same in-memory database
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)

TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, yield session, then drop tables for isolation."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test session."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def make_user(db_session: AsyncSession):
    """Factory: create a user, optionally with an open session."""
    counter = {"n": 0}

    async def _make_user(with_session: bool = True) -> tuple[User, str]:
        counter["n"] += 1
        user = User(
            email=f"guest{counter['n']}@example.com",
            hashed_password=hash_password("testpassword123"),
        )
        db_session.add(user)
        await db_session.flush()

        token = create_access_token(data={"sub": str(user.id)})
        if with_session:
            db_session.add(Session(user_id=user.id, token=token))
        await db_session.commit()
        await db_session.refresh(user)
        return user, token

    return _make_user


@pytest_asyncio.fixture
async def test_user(make_user) -> tuple[User, str]:
    return await make_user()


@pytest_asyncio.fixture
async def auth_headers(test_user) -> dict:
    """Authorization headers with Bearer token."""
    _, token = test_user
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def make_ticket(db_session: AsyncSession):
    """Factory: give a user a ticket, optionally paid."""

    async def _make_ticket(user: User, includes_hotel: bool = True, paid: bool = True) -> Ticket:
        ticket_type = TicketType(
            name="Presencial + Hotel" if includes_hotel else "Presencial",
            price=600 if includes_hotel else 250,
            is_remote=False,
            includes_hotel=includes_hotel,
        )
        db_session.add(ticket_type)
        await db_session.flush()

        ticket = Ticket(
            user_id=user.id,
            ticket_type_id=ticket_type.id,
            status=TicketStatus.PAID if paid else TicketStatus.RESERVED,
        )
        db_session.add(ticket)
        await db_session.flush()

        if paid:
            db_session.add(Payment(
                ticket_id=ticket.id,
                value=ticket_type.price,
                card_issuer="VISA",
                card_last_digits="4242",
            ))
        await db_session.commit()
        return ticket

    return _make_ticket


@pytest_asyncio.fixture
async def paid_user(test_user, make_ticket) -> User:
    """The authenticated test user with a paid hotel ticket."""
    user, _ = test_user
    await make_ticket(user)
    return user


@pytest_asyncio.fixture
async def test_hotel(db_session: AsyncSession) -> Hotel:
    hotel = Hotel(name="Driven Resort", image="https://example.com/hotel.png")
    db_session.add(hotel)
    await db_session.commit()
    await db_session.refresh(hotel)
    return hotel


@pytest_asyncio.fixture
async def make_room(db_session: AsyncSession, test_hotel: Hotel):
    """Factory: create a room in the test hotel."""

    async def _make_room(capacity: int = 3, name: str = "101") -> Room:
        room = Room(name=name, capacity=capacity, hotel_id=test_hotel.id)
        db_session.add(room)
        await db_session.commit()
        await db_session.refresh(room)
        return room

    return _make_room


@pytest_asyncio.fixture
async def make_booking(db_session: AsyncSession):
    """Factory: insert a booking directly, bypassing eligibility checks."""

    async def _make_booking(user: User, room: Room) -> Booking:
        booking = Booking(user_id=user.id, room_id=room.id)
        db_session.add(booking)
        await db_session.commit()
        await db_session.refresh(booking)
        return booking

    return _make_booking


@pytest_asyncio.fixture
async def fill_room(make_user, make_booking):
    """Factory: occupy every slot of a room with other users."""

    async def _fill_room(room: Room) -> None:
        for _ in range(room.capacity):
            other, _ = await make_user(with_session=False)
            await make_booking(other, room)

    return _fill_room
