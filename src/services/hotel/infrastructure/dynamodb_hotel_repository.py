import os

import boto3
from boto3.dynamodb.conditions import Key

from services.hotel.domain.entity import Hotel, Room
from services.hotel.domain.repository import HotelRepository
from services.hotel.domain.value_object import HotelId, HotelName
from services.shared.domain import IsoDateTime


class DynamoDBHotelRepository(HotelRepository):
    """DynamoDBを使用したHotelRepository の具象実装

    ホテルと客室は同じパーティション (HOTEL#{id}) に格納し、
    ホテル一覧は GSI1 (GSI1PK = HOTELS) から取得する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, hotel_id: HotelId) -> Hotel | None:
        """ホテルIDで検索（客室を含めて1回のクエリで取得）"""
        response = self.table.query(
            KeyConditionExpression=Key("PK").eq(f"HOTEL#{hotel_id}"),
            ConsistentRead=True,
        )
        items = response.get("Items", [])

        hotel_item = None
        room_items: list[dict] = []
        for item in items:
            entity_type = item.get("entity_type")
            if entity_type == "HOTEL":
                hotel_item = item
            elif entity_type == "ROOM":
                room_items.append(item)

        if hotel_item is None:
            return None
        return self._to_hotel(hotel_item, [self._to_room(i) for i in room_items])

    def find_all(self) -> list[Hotel]:
        """全ホテルを取得する（ページングされた結果はすべて辿る）"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("HOTELS"),
        }
        items: list[dict] = []

        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                break
            kwargs["ExclusiveStartKey"] = last_evaluated_key

        return [self._to_hotel(item) for item in items]

    def _to_hotel(self, item: dict, rooms: list[Room] | None = None) -> Hotel:
        """DynamoDB アイテムをホテルエンティティに変換する"""
        return Hotel(
            id=HotelId(value=int(item["hotel_id"])),
            name=HotelName(value=item["name"]),
            image=item["image"],
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
            rooms=rooms,
        )

    def _to_room(self, item: dict) -> Room:
        """DynamoDB アイテムを客室エンティティに変換する"""
        return Room(
            id=int(item["room_id"]),
            hotel_id=HotelId(value=int(item["hotel_id"])),
            name=item["name"],
            capacity=int(item["capacity"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
        )
