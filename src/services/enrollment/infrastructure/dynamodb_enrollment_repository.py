import os

import boto3
from boto3.dynamodb.conditions import Key

from services.enrollment.domain.entity import Enrollment
from services.enrollment.domain.repository import EnrollmentRepository
from services.enrollment.domain.value_object import Address, EnrollmentId
from services.shared.domain import UserId


class DynamoDBEnrollmentRepository(EnrollmentRepository):
    """DynamoDBを使用したEnrollmentRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_user_id(self, user_id: UserId) -> Enrollment | None:
        """ユーザーIDで参加登録を検索する（複数ある場合は先頭）"""
        response = self.table.query(
            KeyConditionExpression=Key("PK").eq(f"USER#{user_id}")
            & Key("SK").begins_with("ENROLLMENT#"),
            ConsistentRead=True,
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def _to_entity(self, item: dict) -> Enrollment:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        address = item.get("address", {})
        return Enrollment(
            id=EnrollmentId(value=item["enrollment_id"]),
            user_id=UserId(value=int(item["user_id"])),
            name=item.get("name", ""),
            address=Address(
                street=address.get("street", ""),
                number=address.get("number", ""),
                city=address.get("city", ""),
                state=address.get("state", ""),
                postal_code=address.get("postal_code", ""),
                neighborhood=address.get("neighborhood", ""),
                detail=address.get("detail"),
            ),
        )
