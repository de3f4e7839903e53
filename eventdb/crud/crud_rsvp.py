# eventdb/crud/crud_rsvp.py
"""
CRUD operations for event RSVPs.

(event_id, user_id) is unique at the database level, so two racing
submissions for the same attendee resolve to one row and one DuplicateKey.
"""

import logging
from typing import List, Optional

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from eventdb.constants import RsvpResponse
from eventdb.db.constraints import atomic
from eventdb.models.mixins import utcnow
from eventdb.models.rsvp import RSVP
from eventdb.schemas.rsvp import RSVPCreate, RSVPUpdate

from .base import CRUDBase

logger = logging.getLogger(__name__)


class CRUDRSVP(CRUDBase[RSVP, RSVPCreate, RSVPUpdate]):
    def create_with_event(
        self, db: Session, *, obj_in: RSVPCreate, event_id: int
    ) -> RSVP:
        rsvp = RSVP(**obj_in.model_dump(), event_id=event_id)
        with atomic(db):
            db.add(rsvp)
        db.refresh(rsvp)
        logger.info(f"RSVP {rsvp.response} for user {rsvp.user_id}, event {event_id}")
        return rsvp

    def get_for_user(self, db: Session, *, event_id: int, user_id: int) -> Optional[RSVP]:
        """A user's RSVP for an event, via idx_rsvps_event_user."""
        return (
            db.query(RSVP)
            .filter(and_(RSVP.event_id == event_id, RSVP.user_id == user_id))
            .first()
        )

    def get_by_event(
        self, db: Session, *, event_id: int, response: Optional[str] = None
    ) -> List[RSVP]:
        query = db.query(RSVP).filter(RSVP.event_id == event_id)
        if response:
            query = query.filter(RSVP.response == response)
        return query.order_by(RSVP.response_date, RSVP.rsvp_id).all()

    def update_response(self, db: Session, *, rsvp_id: int, response: str) -> RSVP:
        """Changes the response and stamps a new response_date."""
        rsvp = self.get_or_raise(db, rsvp_id)
        with atomic(db):
            rsvp.response = response
            rsvp.response_date = utcnow()
        db.refresh(rsvp)
        return rsvp

    def confirmed_headcount(self, db: Session, *, event_id: int) -> int:
        """Confirmed attendees plus the guests they bring."""
        total = (
            db.query(func.coalesce(func.sum(1 + RSVP.guests), 0))
            .filter(RSVP.event_id == event_id, RSVP.response == RsvpResponse.CONFIRMED)
            .scalar()
        )
        return int(total)


rsvp = CRUDRSVP(RSVP)
