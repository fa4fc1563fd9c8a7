import os

import boto3
from boto3.dynamodb.conditions import Key

from services.enrollment.domain.value_object import EnrollmentId
from services.ticket.domain.entity import Ticket
from services.ticket.domain.enum import TicketStatus
from services.ticket.domain.repository import TicketRepository
from services.ticket.domain.value_object import TicketId, TicketType


class DynamoDBTicketRepository(TicketRepository):
    """DynamoDBを使用したTicketRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_enrollment_id(self, enrollment_id: EnrollmentId) -> Ticket | None:
        """参加登録IDでチケットを検索する（複数ある場合は先頭）"""
        response = self.table.query(
            KeyConditionExpression=Key("PK").eq(f"ENROLLMENT#{enrollment_id}")
            & Key("SK").begins_with("TICKET#"),
            ConsistentRead=True,
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def _to_entity(self, item: dict) -> Ticket:
        """DynamoDB アイテムをドメインエンティティに変換する

        チケット種別はチケットアイテムに非正規化して保持している。
        """
        ticket_type = item["ticket_type"]
        return Ticket(
            id=TicketId(value=item["ticket_id"]),
            enrollment_id=EnrollmentId(value=item["enrollment_id"]),
            ticket_type=TicketType(
                name=ticket_type.get("name", ""),
                price=int(ticket_type.get("price", 0)),
                is_remote=bool(ticket_type["is_remote"]),
                includes_hotel=bool(ticket_type["includes_hotel"]),
            ),
            status=TicketStatus(item["status"]),
        )
