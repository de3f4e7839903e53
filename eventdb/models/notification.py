# eventdb/models/notification.py
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
    func,
)
from sqlalchemy.orm import relationship

from eventdb.constants import NotificationType
from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck
from eventdb.models.mixins import utcnow


class Notification(Base):
    """
    A message for one user, optionally about an event. Deleting the event
    clears event_id and keeps the notification.
    """

    __tablename__ = "notifications"

    notification_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False
    )
    event_id = Column(
        Integer, ForeignKey("events.event_id", ondelete="SET NULL"), nullable=True
    )
    title = Column(String(100), nullable=False)
    message = Column(Text, nullable=False)
    notification_type = Column(String(20), nullable=False)
    sent_at = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    is_read = Column(Boolean, nullable=False, default=False, server_default=false())

    user = relationship("User")
    event = relationship("Event", back_populates="notifications")

    __table_args__ = (
        CheckConstraint(NotificationType.sql_in("notification_type"), name="notification_type"),
        Index("idx_notifications_user", "user_id"),
        {"comment": "Tracks notifications sent to users"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_notifications_notification_type",
            ("notification_type",),
            NotificationType.is_valid,
        ),
    )
