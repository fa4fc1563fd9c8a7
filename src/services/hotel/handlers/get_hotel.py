from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.enrollment.infrastructure.dynamodb_enrollment_repository import (
    DynamoDBEnrollmentRepository,
)
from services.hotel.applications.get_hotel import GetHotelService
from services.hotel.applications.verify_eligibility import HotelEligibilityVerifier
from services.hotel.handlers.response_models import to_hotel_detail_response
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
service = GetHotelService(verifier=verifier, repository=DynamoDBHotelRepository())


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ホテル詳細（客室付き）取得 Lambda Handler"""

    user_id = get_user_id(event)
    if user_id is None:
        return api_response(401, {"message": "Unauthorized"})

    path_params = event.path_parameters or {}
    raw_hotel_id = path_params.get("hotel_id", "")

    logger.info(
        "Fetching hotel details",
        extra={"user_id": user_id.value, "hotel_id": raw_hotel_id},
    )

    try:
        hotel = service.get(user_id, raw_hotel_id)
    except DomainException as e:
        logger.info(
            "Hotel detail request rejected",
            extra={
                "user_id": user_id.value,
                "hotel_id": raw_hotel_id,
                "reason": str(e),
            },
        )
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to fetch hotel details")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_hotel_detail_response(hotel))
