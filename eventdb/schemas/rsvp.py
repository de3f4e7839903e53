from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class RSVPCreate(BaseModel):
    user_id: int
    response: str = Field(..., json_schema_extra={"example": "confirmed"})
    guests: int = 0
    notes: Optional[str] = None


class RSVPUpdate(BaseModel):
    response: Optional[str] = None
    guests: Optional[int] = None
    notes: Optional[str] = None


class RSVP(BaseModel):
    rsvp_id: int
    event_id: int
    user_id: int
    response: str
    response_date: datetime
    guests: int
    notes: Optional[str] = None

    model_config = {"from_attributes": True}
