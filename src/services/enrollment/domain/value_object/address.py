from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """参加登録の住所"""

    street: str
    number: str
    city: str
    state: str
    postal_code: str
    neighborhood: str = ""
    detail: str | None = None
