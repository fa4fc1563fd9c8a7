import pytest

from services.hotel.domain.entity.hotel import Hotel
from services.hotel.domain.entity.room import Room
from services.hotel.domain.value_object.hotel_id import HotelId
from services.hotel.domain.value_object.hotel_name import HotelName
from services.shared.domain import IsoDateTime


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture"""

    def _factory(
        room_id: int = 1,
        hotel_id: int = 1,
        name: str = "101",
        capacity: int = 2,
        created_at: str = "2024-01-01T10:00:00.000Z",
        updated_at: str = "2024-01-02T10:00:00.000Z",
    ) -> Room:
        return Room(
            id=room_id,
            hotel_id=HotelId(value=hotel_id),
            name=name,
            capacity=capacity,
            created_at=IsoDateTime.from_string(created_at),
            updated_at=IsoDateTime.from_string(updated_at),
        )

    return _factory


@pytest.fixture
def create_hotel():
    """Hotel を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        hotel_id: int = 1,
        name: str = "Grand Hotel",
        image: str = "https://example.com/grand-hotel.jpg",
        created_at: str = "2024-01-01T10:00:00.000Z",
        updated_at: str = "2024-01-02T10:00:00.000Z",
        rooms: list[Room] | None = None,
    ) -> Hotel:
        return Hotel(
            id=HotelId(value=hotel_id),
            name=HotelName(value=name),
            image=image,
            created_at=IsoDateTime.from_string(created_at),
            updated_at=IsoDateTime.from_string(updated_at),
            rooms=rooms,
        )

    return _factory
