from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from eventdb.db.constraints import atomic
from eventdb.models.event_feedback import EventFeedback
from eventdb.schemas.feedback import EventFeedbackCreate, EventFeedbackUpdate

from .base import CRUDBase


class CRUDEventFeedback(CRUDBase[EventFeedback, EventFeedbackCreate, EventFeedbackUpdate]):
    def create_with_event(
        self, db: Session, *, obj_in: EventFeedbackCreate, event_id: int
    ) -> EventFeedback:
        db_obj = EventFeedback(**obj_in.model_dump(), event_id=event_id)
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def get_by_event(self, db: Session, *, event_id: int) -> List[EventFeedback]:
        return (
            db.query(EventFeedback)
            .filter(EventFeedback.event_id == event_id)
            .order_by(EventFeedback.submitted_at, EventFeedback.feedback_id)
            .all()
        )

    def average_rating(self, db: Session, *, event_id: int) -> Optional[float]:
        """Mean rating of an event, or None when nobody has rated it."""
        average = (
            db.query(func.avg(EventFeedback.rating))
            .filter(EventFeedback.event_id == event_id)
            .scalar()
        )
        return float(average) if average is not None else None


event_feedback = CRUDEventFeedback(EventFeedback)
