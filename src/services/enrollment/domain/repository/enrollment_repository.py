from abc import ABC, abstractmethod

from services.enrollment.domain.entity.enrollment import Enrollment
from services.shared.domain import UserId


class EnrollmentRepository(ABC):
    """参加登録レポジトリのインターフェース"""

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> Enrollment | None:
        """ユーザーIDで住所付きの参加登録を検索する"""
        raise NotImplementedError
