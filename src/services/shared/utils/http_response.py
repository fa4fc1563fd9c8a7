import json

from services.shared.domain.exception import (
    DomainException,
    PaymentRequiredException,
    ResourceNotFoundException,
)

_DOMAIN_ERROR_RESPONSES: dict[type[DomainException], tuple[int, str]] = {
    ResourceNotFoundException: (404, "No result for this search!"),
    PaymentRequiredException: (402, "You do not fulfill requirements for access here!"),
}


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def domain_error_response(error: DomainException) -> dict:
    """ドメイン例外を HTTP エラーレスポンスに変換する

    例外メッセージ（調査用の詳細）はクライアントへ返さず、種別ごとの固定メッセージを返す。
    対応表にない例外は 500 とする。
    """
    status_code, message = _DOMAIN_ERROR_RESPONSES.get(
        type(error), (500, "Internal server error")
    )
    return api_response(status_code, {"message": message})
