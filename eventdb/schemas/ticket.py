# eventdb/schemas/ticket.py
"""
Pydantic schemas for ticket types and tickets.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from eventdb.core.datetimes import as_naive_utc


# ============================================
# Ticket Type Schemas
# ============================================

class TicketTypeBase(BaseModel):
    name: str = Field(..., max_length=50, json_schema_extra={"example": "Early Bird"})
    description: Optional[str] = Field(None, max_length=255)
    price: Decimal = Field(..., json_schema_extra={"example": "49.99"})
    quantity_available: int
    sales_start: datetime
    sales_end: datetime
    max_per_user: int = 1

    @field_validator("sales_start", "sales_end")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return as_naive_utc(v)


class TicketTypeCreate(TicketTypeBase):
    pass


class TicketTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    price: Optional[Decimal] = None
    quantity_available: Optional[int] = None
    sales_start: Optional[datetime] = None
    sales_end: Optional[datetime] = None
    max_per_user: Optional[int] = None

    @field_validator("sales_start", "sales_end")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(v)


class TicketType(TicketTypeBase):
    ticket_type_id: int
    event_id: int
    quantity_sold: int = 0

    model_config = {"from_attributes": True}


# ============================================
# Ticket Schemas
# ============================================

class TicketPurchase(BaseModel):
    ticket_type_id: int
    user_id: int
    quantity: int = 1
    # One seat label per ticket, in purchase order
    seat_numbers: Optional[List[str]] = None
    section_id: Optional[int] = None


# Seat placement only; status moves go through cancel and redeem.
class TicketUpdate(BaseModel):
    seat_number: Optional[str] = Field(None, max_length=20)
    section_id: Optional[int] = None


class Ticket(BaseModel):
    ticket_id: int
    ticket_type_id: int
    user_id: int
    purchase_date: datetime
    status: str
    seat_number: Optional[str] = None
    section_id: Optional[int] = None

    model_config = {"from_attributes": True}
