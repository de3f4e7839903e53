# eventdb/models/rsvp.py
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from eventdb.constants import RsvpResponse
from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck
from eventdb.models.mixins import utcnow


class RSVP(Base):
    __tablename__ = "rsvps"

    rsvp_id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer, ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False
    )
    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False
    )
    response = Column(String(20), nullable=False)
    response_date = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    guests = Column(Integer, nullable=False, default=0, server_default="0")
    notes = Column(Text, nullable=True)

    event = relationship("Event", back_populates="rsvps")
    user = relationship("User")

    __table_args__ = (
        # One response per attendee per event
        UniqueConstraint("event_id", "user_id"),
        CheckConstraint(RsvpResponse.sql_in("response"), name="response"),
        CheckConstraint("guests >= 0", name="guests_non_negative"),
        Index("idx_rsvps_event_user", "event_id", "user_id"),
        {"comment": "Tracks user RSVPs for events"},
    )

    __row_checks__ = (
        RowCheck("ck_rsvps_response", ("response",), RsvpResponse.is_valid),
        RowCheck("ck_rsvps_guests_non_negative", ("guests",), lambda guests: guests >= 0),
    )
