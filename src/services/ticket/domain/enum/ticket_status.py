from enum import Enum


class TicketStatus(str, Enum):
    """チケットステータス"""

    RESERVED = "RESERVED"
    PAID = "PAID"
    CANCELED = "CANCELED"
