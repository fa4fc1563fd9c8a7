from dataclasses import dataclass


@dataclass(frozen=True)
class TicketType:
    """チケット種別（オンライン/現地参加、ホテル込みかどうか）

    カタログ設定時に決まり、ここでは参照のみ。

    Attributes:
        name: 種別名（表示用）
        price: 価格。チケットアイテムに非正規化された値をそのまま保持する
            参考情報で、受講資格の判定には使わない
        is_remote: オンライン参加かどうか
        includes_hotel: ホテル宿泊を含むかどうか
    """

    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
