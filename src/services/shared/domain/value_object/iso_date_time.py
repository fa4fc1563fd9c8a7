from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式、UTC)"""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise ValueError("IsoDateTime requires a timezone-aware datetime")

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成（タイムゾーン無しは UTC とみなす）"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(value=dt)

    def __str__(self) -> str:
        """ミリ秒精度・Z 終端の UTC 文字列 (例: 2024-01-01T10:00:00.000Z)"""
        utc = self.value.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
