# eventdb/models/__init__.py
# Import all models to ensure SQLAlchemy can resolve relationships.
# Order follows the foreign-key graph: referenced tables first.

from eventdb.db.base_class import Base
from eventdb.models.user import User, Role, UserRoleAssignment
from eventdb.models.venue import Venue, VenueSection
from eventdb.models.event_category import EventCategory
from eventdb.models.event import Event
from eventdb.models.event_schedule import EventSchedule
from eventdb.models.ticket_type import TicketType
from eventdb.models.ticket import Ticket
from eventdb.models.rsvp import RSVP
from eventdb.models.notification import Notification
from eventdb.models.event_feedback import EventFeedback
from eventdb.models.sponsor import Sponsor, SponsorshipTier, EventSponsor

__all__ = [
    "Base",
    "User",
    "Role",
    "UserRoleAssignment",
    "Venue",
    "VenueSection",
    "EventCategory",
    "Event",
    "EventSchedule",
    "TicketType",
    "Ticket",
    "RSVP",
    "Notification",
    "EventFeedback",
    "Sponsor",
    "SponsorshipTier",
    "EventSponsor",
]
