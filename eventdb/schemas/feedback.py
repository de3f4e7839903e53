from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class EventFeedbackCreate(BaseModel):
    user_id: int
    rating: int
    comment: Optional[str] = None


class EventFeedbackUpdate(BaseModel):
    rating: Optional[int] = None
    comment: Optional[str] = None


class EventFeedback(EventFeedbackCreate):
    feedback_id: int
    event_id: int
    submitted_at: datetime

    model_config = {"from_attributes": True}
