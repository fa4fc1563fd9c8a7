import json

import pytest

from services.hotel.applications.list_hotels import ListHotelsService
from services.hotel.handlers import list_hotels
from services.ticket.domain.enum.ticket_status import TicketStatus


class TestListHotelsHandler:
    @pytest.fixture(autouse=True)
    def service(self, monkeypatch, verifier, hotel_repository):
        service = ListHotelsService(verifier=verifier, repository=hotel_repository)
        monkeypatch.setattr(list_hotels, "service", service)
        return service

    def test_returns_401_without_authorizer_principal(
        self, api_gateway_event, lambda_context, hotel_repository
    ):
        response = list_hotels.lambda_handler(
            api_gateway_event(principal_id=None), lambda_context
        )

        assert response["statusCode"] == 401
        hotel_repository.find_all.assert_not_called()

    def test_returns_404_when_user_is_not_enrolled(
        self, api_gateway_event, lambda_context, enrollment_repository
    ):
        enrollment_repository.find_by_user_id.return_value = None

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"message": "No result for this search!"}

    def test_returns_404_when_enrolled_user_has_no_ticket(
        self,
        api_gateway_event,
        lambda_context,
        enrollment_repository,
        ticket_repository,
        create_enrollment,
    ):
        enrollment_repository.find_by_user_id.return_value = create_enrollment()
        ticket_repository.find_by_enrollment_id.return_value = None

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 404

    def test_returns_402_when_enrolled_user_has_remote_ticket(
        self,
        api_gateway_event,
        lambda_context,
        enrollment_repository,
        ticket_repository,
        create_enrollment,
        create_ticket,
    ):
        enrollment_repository.find_by_user_id.return_value = create_enrollment()
        ticket_repository.find_by_enrollment_id.return_value = create_ticket(
            is_remote=True
        )

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 402
        assert json.loads(response["body"]) == {
            "message": "You do not fulfill requirements for access here!"
        }

    def test_returns_402_when_in_person_ticket_does_not_include_hotel(
        self,
        api_gateway_event,
        lambda_context,
        enrollment_repository,
        ticket_repository,
        create_enrollment,
        create_ticket,
    ):
        enrollment_repository.find_by_user_id.return_value = create_enrollment()
        ticket_repository.find_by_enrollment_id.return_value = create_ticket(
            is_remote=False, includes_hotel=False
        )

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 402

    def test_returns_402_when_ticket_is_only_reserved(
        self,
        api_gateway_event,
        lambda_context,
        enrollment_repository,
        ticket_repository,
        create_enrollment,
        create_ticket,
    ):
        enrollment_repository.find_by_user_id.return_value = create_enrollment()
        ticket_repository.find_by_enrollment_id.return_value = create_ticket(
            status=TicketStatus.RESERVED
        )

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 402

    @pytest.mark.usefixtures("eligible_user")
    def test_returns_404_when_no_hotel_is_registered(
        self, api_gateway_event, lambda_context, hotel_repository
    ):
        hotel_repository.find_all.return_value = []

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 404

    @pytest.mark.usefixtures("eligible_user")
    def test_returns_200_with_hotel_list(
        self, api_gateway_event, lambda_context, hotel_repository, create_hotel
    ):
        hotel_repository.find_all.return_value = [
            create_hotel(
                hotel_id=3,
                name="Grand Hotel",
                image="https://example.com/grand-hotel.jpg",
                created_at="2024-03-01T09:30:00.123Z",
                updated_at="2024-03-02T18:00:00.000Z",
            )
        ]

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == [
            {
                "id": 3,
                "name": "Grand Hotel",
                "image": "https://example.com/grand-hotel.jpg",
                "createdAt": "2024-03-01T09:30:00.123Z",
                "updatedAt": "2024-03-02T18:00:00.000Z",
            }
        ]

    @pytest.mark.usefixtures("eligible_user")
    def test_returns_500_when_storage_fails(
        self, api_gateway_event, lambda_context, hotel_repository
    ):
        hotel_repository.find_all.side_effect = RuntimeError("DynamoDB unavailable")

        response = list_hotels.lambda_handler(api_gateway_event(), lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {"message": "Internal server error"}
