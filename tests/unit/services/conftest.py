from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from services.enrollment.domain.entity.enrollment import Enrollment
from services.enrollment.domain.value_object import Address, EnrollmentId
from services.shared.domain.value_object.user_id import UserId
from services.ticket.domain.entity.ticket import Ticket
from services.ticket.domain.enum.ticket_status import TicketStatus
from services.ticket.domain.value_object import TicketId, TicketType


@pytest.fixture
def user_id():
    """全テスト共通の UserId フィクスチャ"""
    return UserId(value=1)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_enrollment():
    """Enrollment を生成する Factory fixture"""

    def _factory(
        enrollment_id: str = "enrollment-1",
        user_id: int = 1,
        name: str = "Ana Souza",
    ) -> Enrollment:
        return Enrollment(
            id=EnrollmentId(value=enrollment_id),
            user_id=UserId(value=user_id),
            name=name,
            address=Address(
                street="Rua das Flores",
                number="100",
                city="São Paulo",
                state="SP",
                postal_code="01000-000",
                neighborhood="Centro",
            ),
        )

    return _factory


@pytest.fixture
def create_ticket():
    """Ticket を生成する Factory fixture（既定値はホテル閲覧可能なチケット）"""

    def _factory(
        status: TicketStatus = TicketStatus.PAID,
        is_remote: bool = False,
        includes_hotel: bool = True,
        ticket_id: str = "ticket-1",
        enrollment_id: str = "enrollment-1",
    ) -> Ticket:
        return Ticket(
            id=TicketId(value=ticket_id),
            enrollment_id=EnrollmentId(value=enrollment_id),
            ticket_type=TicketType(
                name="Presencial + Hotel",
                price=600,
                is_remote=is_remote,
                includes_hotel=includes_hotel,
            ),
            status=status,
        )

    return _factory


@pytest.fixture
def lambda_context():
    """Lambda Powertools の inject_lambda_context 用のコンテキスト"""

    @dataclass
    class LambdaContext:
        function_name: str = "test-function"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()
