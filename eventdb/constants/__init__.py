from .statuses import EventStatus, NotificationType, RsvpResponse, TicketStatus

__all__ = ["EventStatus", "NotificationType", "RsvpResponse", "TicketStatus"]
