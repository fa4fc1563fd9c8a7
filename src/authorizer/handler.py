import logging
import os

import boto3

logger = logging.getLogger()
logger.setLevel(logging.INFO)

_table = None


def _get_table():
    global _table
    if _table is None:
        dynamodb = boto3.resource("dynamodb")
        _table = dynamodb.Table(os.environ["TABLE_NAME"])
    return _table


def _extract_token(authorization: str) -> str | None:
    """Authorization ヘッダー (Bearer <token>) からトークンを取り出す"""
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token:
        return None
    return token


def _find_session_user_id(token: str) -> str | None:
    """セッションテーブルからトークンに対応するユーザーIDを取得する"""
    response = _get_table().get_item(
        Key={
            "PK": f"SESSION#{token}",
            "SK": f"SESSION#{token}",
        },
    )
    item = response.get("Item")
    if not item:
        return None
    return str(int(item["user_id"]))


def lambda_handler(event, context):
    token = _extract_token(event.get("authorizationToken") or "")
    if token is None:
        logger.info("Missing or malformed bearer token")
        raise Exception("Unauthorized")

    user_id = _find_session_user_id(token)
    if user_id is None:
        logger.info("No session found for the given token")
        raise Exception("Unauthorized")

    method_arn = event["methodArn"]
    arn_parts = method_arn.split(":")
    region = arn_parts[3]
    account_id = arn_parts[4]
    api_gw_arn = arn_parts[5]
    rest_api_id = api_gw_arn.split("/")[0]
    stage = api_gw_arn.split("/")[1]
    resource_arn = (
        f"arn:aws:execute-api:{region}:{account_id}:{rest_api_id}/{stage}/*/*"
    )

    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Allow",
                    "Resource": resource_arn,
                }
            ],
        },
        "context": {"userId": user_id},
    }
