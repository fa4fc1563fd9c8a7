from abc import ABC, abstractmethod

from services.enrollment.domain.value_object import EnrollmentId
from services.ticket.domain.entity.ticket import Ticket


class TicketRepository(ABC):
    """チケットレポジトリのインターフェース"""

    @abstractmethod
    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """参加登録IDでチケット（種別込み）を検索する"""
        raise NotImplementedError
