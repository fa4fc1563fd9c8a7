from unittest.mock import MagicMock

import pytest

from services.hotel.applications.verify_eligibility import HotelEligibilityVerifier


@pytest.fixture
def api_gateway_event():
    """API Gateway (REST) プロキシイベントを生成する Factory fixture"""

    def _factory(
        principal_id: str | None = "1",
        path: str = "/hotels",
        resource: str = "/hotels",
        path_parameters: dict | None = None,
    ) -> dict:
        request_context: dict = {
            "accountId": "123456789012",
            "apiId": "abcdef1234",
            "httpMethod": "GET",
            "path": f"/prod{path}",
            "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
            "resourcePath": resource,
            "stage": "prod",
        }
        if principal_id is not None:
            request_context["authorizer"] = {
                "principalId": principal_id,
                "userId": principal_id,
                "integrationLatency": 12,
            }

        return {
            "resource": resource,
            "path": path,
            "httpMethod": "GET",
            "headers": {"Authorization": "Bearer session-token"},
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": path_parameters,
            "stageVariables": None,
            "requestContext": request_context,
            "body": None,
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def enrollment_repository():
    return MagicMock()


@pytest.fixture
def ticket_repository():
    return MagicMock()


@pytest.fixture
def hotel_repository():
    return MagicMock()


@pytest.fixture
def verifier(enrollment_repository, ticket_repository):
    return HotelEligibilityVerifier(
        enrollment_repository=enrollment_repository,
        ticket_repository=ticket_repository,
    )


@pytest.fixture
def eligible_user(
    enrollment_repository, ticket_repository, create_enrollment, create_ticket
):
    """支払い済み・現地参加・ホテル込みのチケットを持つユーザーを用意する"""
    enrollment_repository.find_by_user_id.return_value = create_enrollment()
    ticket_repository.find_by_enrollment_id.return_value = create_ticket()
