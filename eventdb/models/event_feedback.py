# eventdb/models/event_feedback.py
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck
from eventdb.models.mixins import utcnow

MIN_RATING = 1
MAX_RATING = 5


def _valid_rating(rating) -> bool:
    return (
        isinstance(rating, int)
        and not isinstance(rating, bool)
        and MIN_RATING <= rating <= MAX_RATING
    )


class EventFeedback(Base):
    __tablename__ = "event_feedback"

    feedback_id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer, ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False
    )
    rating = Column(SmallInteger, nullable=False)
    comment = Column(Text, nullable=True)
    submitted_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )

    event = relationship("Event", back_populates="feedback")
    user = relationship("User")

    __table_args__ = (
        UniqueConstraint("event_id", "user_id"),
        CheckConstraint(
            f"rating BETWEEN {MIN_RATING} AND {MAX_RATING}", name="rating_range"
        ),
        {"comment": "Stores attendee feedback for events"},
    )

    __row_checks__ = (
        RowCheck("ck_event_feedback_rating_range", ("rating",), _valid_rating),
    )
