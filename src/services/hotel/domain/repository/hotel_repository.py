from abc import abstractmethod

from services.hotel.domain.entity.hotel import Hotel
from services.hotel.domain.value_object.hotel_id import HotelId
from services.shared.domain import Repository


class HotelRepository(Repository[Hotel, HotelId]):
    """ホテルカタログレポジトリのインターフェース（参照専用）"""

    @abstractmethod
    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで客室を含めて検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Hotel]:
        """全ホテルを取得する（客室は含まない）"""
        raise NotImplementedError
