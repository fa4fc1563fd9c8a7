from __future__ import annotations

from pydantic import BaseModel, Field

from services.hotel.domain.entity.hotel import Hotel
from services.hotel.domain.entity.room import Room


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    id: int
    name: str
    capacity: int
    hotel_id: int = Field(serialization_alias="hotelId")
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class HotelData(BaseModel):
    """ホテルデータのレスポンスモデル"""

    id: int
    name: str
    image: str
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class HotelWithRoomsData(HotelData):
    """客室付きホテルデータのレスポンスモデル"""

    rooms: list[RoomData] = Field(serialization_alias="Rooms")


def _to_room_data(room: Room) -> RoomData:
    return RoomData(
        id=room.id,
        name=room.name,
        capacity=room.capacity,
        hotel_id=room.hotel_id.value,
        created_at=str(room.created_at),
        updated_at=str(room.updated_at),
    )


def to_hotel_list_response(hotels: list[Hotel]) -> list[dict]:
    """Hotel エンティティの一覧をレスポンス配列に変換する"""
    return [
        HotelData(
            id=hotel.id.value,
            name=str(hotel.name),
            image=hotel.image,
            created_at=str(hotel.created_at),
            updated_at=str(hotel.updated_at),
        ).model_dump(by_alias=True)
        for hotel in hotels
    ]


def to_hotel_detail_response(hotel: Hotel) -> dict:
    """Hotel エンティティを客室付きのレスポンス辞書に変換する"""
    return HotelWithRoomsData(
        id=hotel.id.value,
        name=str(hotel.name),
        image=hotel.image,
        created_at=str(hotel.created_at),
        updated_at=str(hotel.updated_at),
        rooms=[_to_room_data(room) for room in hotel.rooms],
    ).model_dump(by_alias=True)
