from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent

from services.shared.domain import UserId


def get_user_id(event: APIGatewayProxyEvent) -> UserId | None:
    """Lambda Authorizer が設定した principalId からユーザーIDを取り出す"""
    request_context = event.raw_event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    principal_id = authorizer.get("principalId")

    if principal_id is None:
        return None
    try:
        return UserId.from_string(str(principal_id))
    except ValueError:
        return None
