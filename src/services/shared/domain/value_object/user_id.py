from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """認証済みユーザーID（Authorizer から渡される）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("UserId must be an integer")
        if self.value <= 0:
            raise ValueError("UserId must be positive")

    @classmethod
    def from_string(cls, s: str) -> UserId:
        """principalId などの文字列表現から生成"""
        if not s or not s.isdigit():
            raise ValueError(f"Invalid user id: {s!r}")
        return cls(value=int(s))

    def __str__(self) -> str:
        return str(self.value)
