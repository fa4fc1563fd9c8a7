from dataclasses import dataclass


@dataclass(frozen=True)
class HotelName:
    """ホテル名

    カタログ管理側で登録された値をそのまま保持する（このサービスでは書き込まない）。
    """

    value: str

    def __str__(self) -> str:
        return self.value
