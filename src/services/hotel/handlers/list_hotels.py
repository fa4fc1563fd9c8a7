from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.enrollment.infrastructure.dynamodb_enrollment_repository import (
    DynamoDBEnrollmentRepository,
)
from services.hotel.applications.list_hotels import ListHotelsService
from services.hotel.applications.verify_eligibility import HotelEligibilityVerifier
from services.hotel.handlers.response_models import to_hotel_list_response
from services.hotel.infrastructure.dynamodb_hotel_repository import (
    DynamoDBHotelRepository,
)
from services.shared.domain.exception import DomainException
from services.shared.utils import api_response, domain_error_response, get_user_id
from services.ticket.infrastructure.dynamodb_ticket_repository import (
    DynamoDBTicketRepository,
)

logger = Logger()

verifier = HotelEligibilityVerifier(
    enrollment_repository=DynamoDBEnrollmentRepository(),
    ticket_repository=DynamoDBTicketRepository(),
)
service = ListHotelsService(verifier=verifier, repository=DynamoDBHotelRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ホテル一覧取得 Lambda Handler"""

    user_id = get_user_id(event)
    if user_id is None:
        return api_response(401, {"message": "Unauthorized"})

    logger.info("Listing hotels", extra={"user_id": user_id.value})

    try:
        hotels = service.list(user_id)
    except DomainException as e:
        logger.info(
            "Hotel list request rejected",
            extra={"user_id": user_id.value, "reason": str(e)},
        )
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to list hotels")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_hotel_list_response(hotels))
