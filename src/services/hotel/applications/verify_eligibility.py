from services.enrollment.domain.repository import EnrollmentRepository
from services.shared.domain import UserId
from services.shared.domain.exception import ResourceNotFoundException
from services.ticket.domain.repository import TicketRepository


class HotelEligibilityVerifier:
    """ホテル閲覧資格の検証

    存在チェック (参加登録・チケット) をビジネスルールの検証より先に行う。
    参加登録のないユーザーに PaymentRequired を返してはならない。
    """

    def __init__(
        self,
        enrollment_repository: EnrollmentRepository,
        ticket_repository: TicketRepository,
    ) -> None:
        self._enrollment_repository = enrollment_repository
        self._ticket_repository = ticket_repository

    def verify(self, user_id: UserId) -> None:
        """ユーザーがホテル情報を閲覧できるか検証する"""
        enrollment = self._enrollment_repository.find_by_user_id(user_id)
        if enrollment is None:
            raise ResourceNotFoundException(f"Enrollment not found: user_id={user_id}")

        ticket = self._ticket_repository.find_by_enrollment_id(enrollment.id)
        if ticket is None:
            raise ResourceNotFoundException(
                f"Ticket not found: enrollment_id={enrollment.id}"
            )

        ticket.ensure_hotel_access()
