from services.hotel.domain.entity.room import Room
from services.hotel.domain.value_object import HotelId, HotelName
from services.shared.domain import Entity, IsoDateTime


class Hotel(Entity[HotelId]):
    """ホテルエンティティ

    一覧取得では客室を読み込まず、詳細取得でのみ客室を含める。
    """

    def __init__(
        self,
        id: HotelId,
        name: HotelName,
        image: str,
        created_at: IsoDateTime,
        updated_at: IsoDateTime,
        rooms: list[Room] | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._image = image
        self._created_at = created_at
        self._updated_at = updated_at
        self._rooms = list(rooms) if rooms is not None else []

        for room in self._rooms:
            if room.hotel_id != id:
                raise ValueError(
                    f"Room {room.id} belongs to hotel {room.hotel_id}, not {id}"
                )

    @property
    def name(self) -> HotelName:
        return self._name

    @property
    def image(self) -> str:
        return self._image

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)
