from services.enrollment.domain.value_object import Address, EnrollmentId
from services.shared.domain import Entity, UserId


class Enrollment(Entity[EnrollmentId]):
    """参加登録エンティティ（イベント登録フローで作成され、ここでは参照のみ）"""

    def __init__(
        self,
        id: EnrollmentId,
        user_id: UserId,
        name: str,
        address: Address,
    ) -> None:
        super().__init__(id)
        self._user_id = user_id
        self._name = name
        self._address = address

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def address(self) -> Address:
        return self._address
