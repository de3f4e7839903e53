# eventdb/models/event_schedule.py
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck


class EventSchedule(Base):
    """A session within a multi-session event."""

    __tablename__ = "event_schedule"

    schedule_id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    session_title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    speaker_name = Column(String(100), nullable=True)
    speaker_bio = Column(Text, nullable=True)

    event = relationship("Event", back_populates="sessions")

    __table_args__ = (
        CheckConstraint("end_time > start_time", name="end_after_start"),
        {"comment": "Detailed schedule for multi-session events"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_event_schedule_end_after_start",
            ("start_time", "end_time"),
            lambda start, end: end > start,
        ),
    )
