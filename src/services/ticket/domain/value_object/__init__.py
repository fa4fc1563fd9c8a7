from .ticket_id import TicketId as TicketId
from .ticket_type import TicketType as TicketType
