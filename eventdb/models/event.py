# eventdb/models/event.py
from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    false,
)
from sqlalchemy.orm import relationship

from eventdb.constants import EventStatus
from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck
from eventdb.models.mixins import TimestampMixin


class Event(TimestampMixin, Base):
    """
    The central entity. An event references its organizer, category and
    venue (deleting any of those is restricted while the event exists) and
    owns its schedule, ticket types, RSVPs, feedback and sponsorships.
    """

    __tablename__ = "events"

    event_id = Column(Integer, primary_key=True, autoincrement=True)
    organizer_id = Column(
        Integer,
        ForeignKey("users.user_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    category_id = Column(
        Integer,
        ForeignKey("event_categories.category_id", ondelete="RESTRICT"),
        nullable=False,
    )
    venue_id = Column(
        Integer, ForeignKey("venues.venue_id", ondelete="RESTRICT"), nullable=True
    )
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    start_datetime = Column(DateTime, nullable=False)
    end_datetime = Column(DateTime, nullable=False)
    status = Column(
        String(20),
        nullable=False,
        default=EventStatus.DRAFT,
        server_default=EventStatus.DRAFT,
    )
    is_recurring = Column(Boolean, nullable=False, default=False, server_default=false())
    recurrence_pattern = Column(String(50), nullable=True)
    image_url = Column(String(255), nullable=True)

    # References (lookup only)
    organizer = relationship("User")
    category = relationship("EventCategory")
    venue = relationship("Venue")

    # Owned rows, removed by ON DELETE CASCADE
    sessions = relationship(
        "EventSchedule",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="EventSchedule.start_time",
    )
    ticket_types = relationship(
        "TicketType",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    rsvps = relationship(
        "RSVP", back_populates="event", cascade="all, delete-orphan", passive_deletes=True
    )
    feedback = relationship(
        "EventFeedback",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    sponsorships = relationship(
        "EventSponsor",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # Notifications outlive the event: ON DELETE SET NULL
    notifications = relationship(
        "Notification", back_populates="event", passive_deletes=True
    )

    __table_args__ = (
        CheckConstraint("end_datetime > start_datetime", name="end_after_start"),
        CheckConstraint(EventStatus.sql_in("status"), name="status"),
        Index("idx_events_datetime", "start_datetime", "end_datetime"),
        Index("idx_events_status", "status"),
        {"comment": "Main table for event information"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_events_end_after_start",
            ("start_datetime", "end_datetime"),
            lambda start, end: end > start,
        ),
        RowCheck("ck_events_status", ("status",), EventStatus.is_valid),
    )

    def __repr__(self):
        return f"<Event(event_id={self.event_id}, title={self.title})>"
