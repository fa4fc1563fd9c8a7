from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HotelId:
    """ホテルID"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("HotelId must be an integer")
        if self.value <= 0:
            raise ValueError("HotelId must be positive")

    @classmethod
    def from_string(cls, s: str) -> HotelId:
        """パスパラメータなどの文字列表現から生成"""
        if not s or not s.isdigit():
            raise ValueError(f"Invalid hotel id: {s!r}")
        return cls(value=int(s))

    def __str__(self) -> str:
        return str(self.value)
