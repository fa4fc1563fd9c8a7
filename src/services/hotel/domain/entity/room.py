from services.hotel.domain.value_object import HotelId
from services.shared.domain import Entity, IsoDateTime


class Room(Entity[int]):
    """客室エンティティ（ホテルに属する）"""

    def __init__(
        self,
        id: int,
        hotel_id: HotelId,
        name: str,
        capacity: int,
        created_at: IsoDateTime,
        updated_at: IsoDateTime,
    ) -> None:
        super().__init__(id)
        self._hotel_id = hotel_id
        self._name = name
        self._capacity = capacity
        self._created_at = created_at
        self._updated_at = updated_at

    @property
    def hotel_id(self) -> HotelId:
        return self._hotel_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at
