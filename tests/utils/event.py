from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from eventdb import crud
from eventdb.models.event import Event
from eventdb.models.event_category import EventCategory
from eventdb.models.ticket_type import TicketType
from eventdb.schemas.event import EventCategoryCreate, EventCreate
from eventdb.schemas.ticket import TicketTypeCreate


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_random_category(db: Session) -> EventCategory:
    category_in = EventCategoryCreate(name=f"Category {uuid4().hex[:8]}")
    return crud.event_category.create(db, obj_in=category_in)


def create_random_event(
    db: Session,
    organizer_id: int,
    *,
    category_id: Optional[int] = None,
    venue_id: Optional[int] = None,
    start: Optional[datetime] = None,
    duration: timedelta = timedelta(hours=3),
) -> Event:
    """
    Creates a dummy draft event ten days from now.
    """
    if category_id is None:
        category_id = create_random_category(db).category_id
    start_datetime = start or utc_now() + timedelta(days=10)

    event_in = EventCreate(
        category_id=category_id,
        venue_id=venue_id,
        title="Test Event",
        description="An event created by the test suite",
        start_datetime=start_datetime,
        end_datetime=start_datetime + duration,
    )
    return crud.event.create_with_organizer(db, obj_in=event_in, organizer_id=organizer_id)


def create_ticket_type(
    db: Session,
    event_id: int,
    *,
    quantity_available: int = 100,
    max_per_user: int = 4,
    price: Decimal = Decimal("25.00"),
    sales_start: Optional[datetime] = None,
    sales_end: Optional[datetime] = None,
) -> TicketType:
    """
    Creates a ticket type that is on sale right now unless a window is given.
    """
    now = utc_now()
    ticket_type_in = TicketTypeCreate(
        name="General Admission",
        price=price,
        quantity_available=quantity_available,
        sales_start=sales_start or now - timedelta(days=1),
        sales_end=sales_end or now + timedelta(days=5),
        max_per_user=max_per_user,
    )
    return crud.ticket_type.create_with_event(db, obj_in=ticket_type_in, event_id=event_id)
