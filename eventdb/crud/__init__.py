# eventdb/crud/__init__.py

from .crud_event import event, event_schedule
from .crud_event_category import event_category
from .crud_event_feedback import event_feedback
from .crud_notification import notification
from .crud_rsvp import rsvp
from .crud_sponsor import event_sponsor, sponsor, sponsorship_tier
from .crud_ticket import ticket
from .crud_ticket_type import ticket_type
from .crud_user import role, user
from .crud_venue import venue, venue_section
