from .entity import Ticket as Ticket
from .enum import TicketStatus as TicketStatus
from .repository import TicketRepository as TicketRepository
from .value_object import TicketId as TicketId
from .value_object import TicketType as TicketType
