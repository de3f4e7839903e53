# eventdb/crud/crud_event.py
import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session

from eventdb.constants import EventStatus
from eventdb.core.datetimes import as_naive_utc
from eventdb.core.exceptions import ConstraintViolation
from eventdb.db.constraints import atomic
from eventdb.models.event import Event
from eventdb.models.event_schedule import EventSchedule
from eventdb.schemas.event import (
    EventCreate,
    EventScheduleCreate,
    EventScheduleUpdate,
    EventUpdate,
)

from .base import CRUDBase

logger = logging.getLogger(__name__)


class CRUDEvent(CRUDBase[Event, EventCreate, EventUpdate]):
    def create_with_organizer(
        self, db: Session, *, obj_in: EventCreate, organizer_id: int
    ) -> Event:
        """Creates an event in draft status."""
        db_obj = self.model(
            **obj_in.model_dump(), organizer_id=organizer_id, status=EventStatus.DRAFT
        )
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        logger.info(f"Event {db_obj.event_id} created by organizer {organizer_id}")
        return db_obj

    def get_in_range(
        self, db: Session, *, start: datetime, end: datetime
    ) -> List[Event]:
        """
        Events overlapping the half-open window [start, end). Served by
        idx_events_datetime.
        """
        start, end = as_naive_utc(start), as_naive_utc(end)
        return (
            db.query(self.model)
            .filter(self.model.start_datetime < end, self.model.end_datetime > start)
            .order_by(self.model.start_datetime)
            .all()
        )

    def get_by_status(self, db: Session, *, status: str) -> List[Event]:
        return (
            db.query(self.model)
            .filter(self.model.status == status)
            .order_by(self.model.event_id)
            .all()
        )

    def get_by_organizer(self, db: Session, *, organizer_id: int) -> List[Event]:
        return (
            db.query(self.model)
            .filter(self.model.organizer_id == organizer_id)
            .order_by(self.model.start_datetime)
            .all()
        )

    def transition_status(self, db: Session, *, event_id: int, status: str) -> Event:
        """
        Moves an event along its lifecycle:
        draft -> published | cancelled, published -> cancelled | completed.
        """
        db_obj = self.get_or_raise(db, event_id)
        if not EventStatus.is_valid(status):
            raise ConstraintViolation("ck_events_status", f"Unknown event status {status!r}")
        if not EventStatus.can_transition(db_obj.status, status):
            raise ConstraintViolation(
                "event_status_transition",
                f"Event {event_id} cannot move from {db_obj.status} to {status}",
            )
        previous = db_obj.status
        with atomic(db):
            db_obj.status = status
        db.refresh(db_obj)
        logger.info(f"Event {event_id} moved from {previous} to {status}")
        return db_obj


class CRUDEventSchedule(CRUDBase[EventSchedule, EventScheduleCreate, EventScheduleUpdate]):
    def create_with_event(
        self, db: Session, *, obj_in: EventScheduleCreate, event_id: int
    ) -> EventSchedule:
        db_obj = self.model(**obj_in.model_dump(), event_id=event_id)
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def get_by_event(self, db: Session, *, event_id: int) -> List[EventSchedule]:
        return (
            db.query(self.model)
            .filter(self.model.event_id == event_id)
            .order_by(self.model.start_time)
            .all()
        )


event = CRUDEvent(Event)
event_schedule = CRUDEventSchedule(EventSchedule)
