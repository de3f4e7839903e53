# eventdb/crud/crud_ticket.py
"""
Ticket issuing, cancellation and redemption.

Inventory lives in ticket_types.quantity_sold. Purchases move it with a single
conditional UPDATE that only matches while enough tickets remain, so two
concurrent buyers can never both take the last ticket. The ticket-type row is
locked for the duration of the purchase so the per-user cap is counted
against a stable set of tickets. SQLite ignores FOR UPDATE but serialises
writers, so the cap is counted again after the new tickets are flushed and
the purchase is rolled back if a concurrent buyer got in first.

Tickets are never deleted; cancel them instead. Only seat placement can be
edited directly.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import func, update
from sqlalchemy.orm import Session

from eventdb.constants import TicketStatus
from eventdb.core.datetimes import as_naive_utc, naive_utcnow
from eventdb.core.exceptions import ConstraintViolation, NotFound
from eventdb.db.constraints import atomic
from eventdb.models.ticket import Ticket
from eventdb.models.ticket_type import TicketType
from eventdb.schemas.ticket import TicketPurchase, TicketUpdate

from .base import CRUDBase

logger = logging.getLogger(__name__)

SOLD_OUT_RULE = "ck_ticket_types_quantity_sold_within_available"
MAX_PER_USER_RULE = "ticket_types_max_per_user"
UPDATABLE_FIELDS = frozenset({"seat_number", "section_id"})


class CRUDTicket(CRUDBase[Ticket, TicketPurchase, TicketUpdate]):
    def create(self, db: Session, *, obj_in: TicketPurchase) -> Ticket:
        """Issues a single ticket through the same path as ``purchase``."""
        if obj_in.quantity != 1:
            raise ConstraintViolation(
                "ticket_quantity_single",
                f"create issues one ticket, got quantity {obj_in.quantity}; use purchase",
            )
        return self.purchase(db, obj_in=obj_in)[0]

    def update(
        self,
        db: Session,
        *,
        db_obj: Ticket,
        obj_in: Union[TicketUpdate, Dict[str, Any]],
    ) -> Ticket:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        rejected = sorted(set(update_data) - UPDATABLE_FIELDS)
        if rejected:
            raise ConstraintViolation(
                "ticket_update_fields",
                f"Ticket fields {rejected} cannot be updated directly; "
                "use purchase, cancel or redeem",
            )
        return super().update(db, db_obj=db_obj, obj_in=update_data)

    def remove(self, db: Session, *, id: Any) -> None:
        ticket = self.get_or_raise(db, id)
        raise ConstraintViolation(
            "ticket_delete_restricted",
            f"Ticket {ticket.ticket_id} cannot be deleted; cancel it instead",
        )

    def purchase(
        self,
        db: Session,
        *,
        obj_in: TicketPurchase,
        now: Optional[datetime] = None,
    ) -> List[Ticket]:
        """
        Issues ``quantity`` tickets of one type to one user.

        Raises:
            NotFound: the ticket type does not exist
            ConstraintViolation: outside the sales window, over the per-user
                cap, or not enough tickets left
            ReferentialViolation: unknown user or section
        """
        quantity = obj_in.quantity
        if quantity < 1:
            raise ConstraintViolation("ticket_quantity_positive", "Quantity must be at least 1")
        seats = obj_in.seat_numbers
        if seats is not None and len(seats) != quantity:
            raise ConstraintViolation(
                "ticket_seat_numbers",
                f"Got {len(seats)} seat numbers for {quantity} tickets",
            )
        now = as_naive_utc(now) if now else naive_utcnow()

        with atomic(db):
            # Lock the ticket type row to serialise purchases against it
            ticket_type = (
                db.query(TicketType)
                .filter(TicketType.ticket_type_id == obj_in.ticket_type_id)
                .with_for_update()
                .first()
            )
            if ticket_type is None:
                raise NotFound("TicketType", obj_in.ticket_type_id)

            if not ticket_type.sales_start <= now <= ticket_type.sales_end:
                raise ConstraintViolation(
                    "ticket_sales_window",
                    f"Ticket type {ticket_type.ticket_type_id} is not on sale at {now}",
                )

            held = self.count_held(
                db, ticket_type_id=ticket_type.ticket_type_id, user_id=obj_in.user_id
            )
            if held + quantity > ticket_type.max_per_user:
                logger.info(
                    f"Purchase rejected for user {obj_in.user_id}: holds {held}, "
                    f"cap {ticket_type.max_per_user}"
                )
                raise ConstraintViolation(
                    MAX_PER_USER_RULE,
                    f"User {obj_in.user_id} may hold at most "
                    f"{ticket_type.max_per_user} tickets of this type",
                )

            result = db.execute(
                update(TicketType)
                .where(
                    TicketType.ticket_type_id == ticket_type.ticket_type_id,
                    TicketType.quantity_sold + quantity <= TicketType.quantity_available,
                )
                .values(quantity_sold=TicketType.quantity_sold + quantity)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                raise ConstraintViolation(
                    SOLD_OUT_RULE,
                    f"Not enough tickets left for ticket type {ticket_type.ticket_type_id}",
                )

            tickets = [
                Ticket(
                    ticket_type_id=ticket_type.ticket_type_id,
                    user_id=obj_in.user_id,
                    status=TicketStatus.ACTIVE,
                    seat_number=seats[i] if seats else None,
                    section_id=obj_in.section_id,
                )
                for i in range(quantity)
            ]
            db.add_all(tickets)
            db.flush()

            held = self.count_held(
                db, ticket_type_id=ticket_type.ticket_type_id, user_id=obj_in.user_id
            )
            if held > ticket_type.max_per_user:
                logger.warning(
                    f"Concurrent purchase put user {obj_in.user_id} at {held} tickets "
                    f"of type {ticket_type.ticket_type_id}, cap {ticket_type.max_per_user}"
                )
                raise ConstraintViolation(
                    MAX_PER_USER_RULE,
                    f"User {obj_in.user_id} may hold at most "
                    f"{ticket_type.max_per_user} tickets of this type",
                )

        for ticket in tickets:
            db.refresh(ticket)
        logger.info(
            f"Issued {quantity} ticket(s) of type {obj_in.ticket_type_id} "
            f"to user {obj_in.user_id}"
        )
        return tickets

    def cancel(self, db: Session, *, ticket_id: int) -> Ticket:
        """Cancels an active ticket and returns it to the inventory."""
        ticket = self.get_or_raise(db, ticket_id)
        self._check_active(ticket, TicketStatus.CANCELLED)
        with atomic(db):
            ticket.status = TicketStatus.CANCELLED
            db.execute(
                update(TicketType)
                .where(
                    TicketType.ticket_type_id == ticket.ticket_type_id,
                    TicketType.quantity_sold > 0,
                )
                .values(quantity_sold=TicketType.quantity_sold - 1)
                .execution_options(synchronize_session=False)
            )
        db.refresh(ticket)
        logger.info(f"Ticket {ticket_id} cancelled")
        return ticket

    def redeem(self, db: Session, *, ticket_id: int) -> Ticket:
        ticket = self.get_or_raise(db, ticket_id)
        self._check_active(ticket, TicketStatus.REDEEMED)
        with atomic(db):
            ticket.status = TicketStatus.REDEEMED
        db.refresh(ticket)
        return ticket

    def count_held(self, db: Session, *, ticket_type_id: int, user_id: int) -> int:
        """Tickets of a type a user holds; cancelled tickets do not count."""
        return (
            db.query(func.count(Ticket.ticket_id))
            .filter(
                Ticket.ticket_type_id == ticket_type_id,
                Ticket.user_id == user_id,
                Ticket.status != TicketStatus.CANCELLED,
            )
            .scalar()
        )

    def get_by_user(
        self, db: Session, *, user_id: int, status: Optional[str] = None
    ) -> List[Ticket]:
        query = db.query(Ticket).filter(Ticket.user_id == user_id)
        if status:
            query = query.filter(Ticket.status == status)
        return query.order_by(Ticket.ticket_id).all()

    def get_by_status(self, db: Session, *, status: str) -> List[Ticket]:
        return db.query(Ticket).filter(Ticket.status == status).order_by(Ticket.ticket_id).all()

    @staticmethod
    def _check_active(ticket: Ticket, target: str) -> None:
        if ticket.status != TicketStatus.ACTIVE:
            raise ConstraintViolation(
                "ticket_status_transition",
                f"Ticket {ticket.ticket_id} is {ticket.status}, cannot become {target}",
            )


ticket = CRUDTicket(Ticket)
