# eventdb/models/ticket_type.py
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck


class TicketType(Base):
    """
    A priced admission category for one event.

    ``quantity_sold`` is the running inventory counter. It is only moved by
    conditional UPDATEs (see crud_ticket) and the table refuses any row where
    it leaves the 0..quantity_available range, so tickets can never oversell.
    """

    __tablename__ = "ticket_types"

    ticket_type_id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(
        Integer,
        ForeignKey("events.event_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(50), nullable=False)
    description = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    quantity_available = Column(Integer, nullable=False)
    quantity_sold = Column(Integer, nullable=False, default=0, server_default="0")
    sales_start = Column(DateTime, nullable=False)
    sales_end = Column(DateTime, nullable=False)
    max_per_user = Column(Integer, nullable=False, default=1, server_default="1")

    event = relationship("Event", back_populates="ticket_types")
    # Tickets are financial records: ON DELETE RESTRICT, never touched by the ORM
    tickets = relationship("Ticket", back_populates="ticket_type", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("sales_end > sales_start", name="sales_window"),
        CheckConstraint("quantity_available >= 0", name="quantity_available_non_negative"),
        CheckConstraint("max_per_user > 0", name="max_per_user_positive"),
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint(
            "quantity_sold >= 0 AND quantity_sold <= quantity_available",
            name="quantity_sold_within_available",
        ),
        {"comment": "Defines different ticket types for events"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_ticket_types_sales_window",
            ("sales_start", "sales_end"),
            lambda start, end: end > start,
        ),
        RowCheck(
            "ck_ticket_types_quantity_available_non_negative",
            ("quantity_available",),
            lambda quantity: quantity >= 0,
        ),
        RowCheck(
            "ck_ticket_types_max_per_user_positive",
            ("max_per_user",),
            lambda cap: cap > 0,
        ),
        RowCheck("ck_ticket_types_price_non_negative", ("price",), lambda price: price >= 0),
        RowCheck(
            "ck_ticket_types_quantity_sold_within_available",
            ("quantity_sold", "quantity_available"),
            lambda sold, available: 0 <= sold <= available,
        ),
    )

    @property
    def tickets_remaining(self) -> int:
        return self.quantity_available - (self.quantity_sold or 0)

    @property
    def is_sold_out(self) -> bool:
        return self.tickets_remaining <= 0
