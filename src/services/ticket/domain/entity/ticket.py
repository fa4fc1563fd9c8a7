from services.enrollment.domain.value_object import EnrollmentId
from services.shared.domain import Entity
from services.shared.domain.exception import PaymentRequiredException
from services.ticket.domain.enum import TicketStatus
from services.ticket.domain.value_object import TicketId, TicketType


class Ticket(Entity[TicketId]):
    """チケットエンティティ"""

    def __init__(
        self,
        id: TicketId,
        enrollment_id: EnrollmentId,
        ticket_type: TicketType,
        status: TicketStatus = TicketStatus.RESERVED,
    ) -> None:
        super().__init__(id)
        self._enrollment_id = enrollment_id
        self._ticket_type = ticket_type
        self._status = status

    @property
    def enrollment_id(self) -> EnrollmentId:
        return self._enrollment_id

    @property
    def ticket_type(self) -> TicketType:
        return self._ticket_type

    @property
    def status(self) -> TicketStatus:
        return self._status

    def ensure_hotel_access(self) -> None:
        """ホテル情報を閲覧できるチケットか検証する

        支払い済み・現地参加・ホテル込みの 3 条件をすべて満たす必要がある。
        """
        if self._status != TicketStatus.PAID:
            raise PaymentRequiredException(
                f"Ticket is not paid: status={self._status.value}"
            )
        if self._ticket_type.is_remote:
            raise PaymentRequiredException("Remote ticket does not include hotel")
        if not self._ticket_type.includes_hotel:
            raise PaymentRequiredException("Ticket type does not include hotel")
