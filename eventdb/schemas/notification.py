from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class NotificationCreate(BaseModel):
    event_id: Optional[int] = None
    title: str = Field(..., max_length=100, json_schema_extra={"example": "Doors open at 7pm"})
    message: str
    notification_type: str = Field(..., json_schema_extra={"example": "reminder"})


class Notification(NotificationCreate):
    notification_id: int
    user_id: int
    sent_at: datetime
    is_read: bool

    model_config = {"from_attributes": True}
