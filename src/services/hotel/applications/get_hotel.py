from services.hotel.applications.verify_eligibility import HotelEligibilityVerifier
from services.hotel.domain.entity import Hotel
from services.hotel.domain.repository import HotelRepository
from services.hotel.domain.value_object import HotelId
from services.shared.domain import UserId
from services.shared.domain.exception import ResourceNotFoundException


class GetHotelService:
    """ホテル詳細（客室付き）取得のユースケース"""

    def __init__(
        self, verifier: HotelEligibilityVerifier, repository: HotelRepository
    ) -> None:
        self._verifier = verifier
        self._repository = repository

    def get(self, user_id: UserId, raw_hotel_id: str) -> Hotel:
        """受講資格を確認してからホテルを取得する。

        Args:
            user_id: 認証済みユーザーID
            raw_hotel_id: パスパラメータのホテルID（未検証の文字列）

        Raises:
            ResourceNotFoundException: 申込・チケット・ホテルのいずれかが存在しない
            PaymentRequiredException: チケットがホテル閲覧の条件を満たさない
        """
        self._verifier.verify(user_id)

        # 数値でない ID に一致するホテルは存在しない
        try:
            hotel_id = HotelId.from_string(raw_hotel_id)
        except ValueError as e:
            raise ResourceNotFoundException(f"Invalid hotel_id: {raw_hotel_id}") from e

        hotel = self._repository.find_by_id(hotel_id)
        if hotel is None:
            raise ResourceNotFoundException(f"Hotel not found: {hotel_id}")
        return hotel
