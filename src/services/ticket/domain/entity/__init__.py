from .ticket import Ticket as Ticket
