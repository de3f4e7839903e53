# eventdb/crud/crud_ticket_type.py
from typing import List

from sqlalchemy.orm import Session

from eventdb.db.constraints import atomic
from eventdb.models.ticket_type import TicketType
from eventdb.schemas.ticket import TicketTypeCreate, TicketTypeUpdate

from .base import CRUDBase


class CRUDTicketType(CRUDBase[TicketType, TicketTypeCreate, TicketTypeUpdate]):
    """CRUD operations for TicketType model."""

    def create_with_event(
        self, db: Session, *, obj_in: TicketTypeCreate, event_id: int
    ) -> TicketType:
        """Create a new ticket type for an event."""
        db_obj = TicketType(**obj_in.model_dump(), event_id=event_id, quantity_sold=0)
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def get_by_event(self, db: Session, *, event_id: int) -> List[TicketType]:
        """Get all ticket types for an event."""
        return (
            db.query(self.model)
            .filter(self.model.event_id == event_id)
            .order_by(self.model.price, self.model.ticket_type_id)
            .all()
        )

    def tickets_remaining(self, db: Session, *, ticket_type_id: int) -> int:
        ticket_type = self.get_or_raise(db, ticket_type_id)
        db.refresh(ticket_type)
        return ticket_type.tickets_remaining


ticket_type = CRUDTicketType(TicketType)
