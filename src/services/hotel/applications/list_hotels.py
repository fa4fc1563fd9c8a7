from services.hotel.applications.verify_eligibility import HotelEligibilityVerifier
from services.hotel.domain.entity import Hotel
from services.hotel.domain.repository import HotelRepository
from services.shared.domain import UserId
from services.shared.domain.exception import ResourceNotFoundException


class ListHotelsService:
    """ホテル一覧取得のユースケース"""

    def __init__(
        self, verifier: HotelEligibilityVerifier, repository: HotelRepository
    ) -> None:
        self._verifier = verifier
        self._repository = repository

    def list(self, user_id: UserId) -> list[Hotel]:
        """資格を検証したうえでホテル一覧を返す（0件は NotFound）"""
        self._verifier.verify(user_id)

        hotels = self._repository.find_all()
        if not hotels:
            raise ResourceNotFoundException("No hotels registered")
        return hotels
