# eventdb/models/ticket.py
from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import relationship

from eventdb.constants import TicketStatus
from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck
from eventdb.models.mixins import utcnow


class Ticket(Base):
    """An individual purchased admission. Every reference is delete-restricted."""

    __tablename__ = "tickets"

    ticket_id = Column(Integer, primary_key=True, autoincrement=True)
    ticket_type_id = Column(
        Integer,
        ForeignKey("ticket_types.ticket_type_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer, ForeignKey("users.user_id", ondelete="RESTRICT"), nullable=False
    )
    purchase_date = Column(
        DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now()
    )
    status = Column(
        String(20),
        nullable=False,
        default=TicketStatus.ACTIVE,
        server_default=TicketStatus.ACTIVE,
    )
    seat_number = Column(String(20), nullable=True)
    section_id = Column(
        Integer,
        ForeignKey("venue_sections.section_id", ondelete="RESTRICT"),
        nullable=True,
    )

    ticket_type = relationship("TicketType", back_populates="tickets")
    user = relationship("User")
    section = relationship("VenueSection")

    __table_args__ = (
        CheckConstraint(TicketStatus.sql_in("status"), name="status"),
        Index("idx_tickets_user", "user_id"),
        Index("idx_tickets_status", "status"),
        {"comment": "Individual tickets purchased by users"},
    )

    __row_checks__ = (RowCheck("ck_tickets_status", ("status",), TicketStatus.is_valid),)
