from .ticket_repository import TicketRepository as TicketRepository
