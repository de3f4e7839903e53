from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from eventdb.core.datetimes import as_naive_utc


class EventCategoryBase(BaseModel):
    name: str = Field(..., max_length=50, json_schema_extra={"example": "Concert"})
    description: Optional[str] = Field(None, max_length=255)


class EventCategoryCreate(EventCategoryBase):
    pass


class EventCategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=255)


class EventCategory(EventCategoryBase):
    category_id: int

    model_config = {"from_attributes": True}


class EventCreate(BaseModel):
    category_id: int
    venue_id: Optional[int] = None
    title: str = Field(..., max_length=100, json_schema_extra={"example": "Global AI Summit"})
    description: str
    start_datetime: datetime
    end_datetime: datetime
    is_recurring: bool = False
    recurrence_pattern: Optional[str] = Field(None, max_length=50)
    image_url: Optional[str] = Field(None, max_length=255)

    @field_validator("start_datetime", "end_datetime")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return as_naive_utc(v)


# Status is not updatable here; lifecycle moves go through transition_status.
class EventUpdate(BaseModel):
    category_id: Optional[int] = None
    venue_id: Optional[int] = None
    title: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    start_datetime: Optional[datetime] = None
    end_datetime: Optional[datetime] = None
    is_recurring: Optional[bool] = None
    recurrence_pattern: Optional[str] = Field(None, max_length=50)
    image_url: Optional[str] = Field(None, max_length=255)

    @field_validator("start_datetime", "end_datetime")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(v)


class Event(BaseModel):
    event_id: int
    organizer_id: int
    category_id: int
    venue_id: Optional[int] = None
    title: str
    description: str
    start_datetime: datetime
    end_datetime: datetime
    status: str = Field(..., json_schema_extra={"example": "published"})
    is_recurring: bool
    recurrence_pattern: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EventScheduleBase(BaseModel):
    session_title: str = Field(..., max_length=100, json_schema_extra={"example": "Opening Keynote"})
    description: Optional[str] = None
    start_time: datetime
    end_time: datetime
    speaker_name: Optional[str] = Field(None, max_length=100)
    speaker_bio: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_to_utc(cls, v: datetime) -> datetime:
        return as_naive_utc(v)


class EventScheduleCreate(EventScheduleBase):
    pass


class EventScheduleUpdate(BaseModel):
    session_title: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    speaker_name: Optional[str] = Field(None, max_length=100)
    speaker_bio: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_to_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(v)


class EventSchedule(EventScheduleBase):
    schedule_id: int
    event_id: int

    model_config = {"from_attributes": True}
