from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class VenueBase(BaseModel):
    name: str = Field(..., max_length=100, json_schema_extra={"example": "Grand Convention Center"})
    address: str = Field(..., max_length=255, json_schema_extra={"example": "123 Innovation Drive"})
    city: str = Field(..., max_length=50)
    state: str = Field(..., max_length=50)
    country: str = Field(..., max_length=50)
    postal_code: str = Field(..., max_length=20)
    capacity: int
    description: Optional[str] = None


class VenueCreate(VenueBase):
    pass


class VenueUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=50)
    country: Optional[str] = Field(None, max_length=50)
    postal_code: Optional[str] = Field(None, max_length=20)
    capacity: Optional[int] = None
    description: Optional[str] = None


class Venue(VenueBase):
    venue_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VenueSectionBase(BaseModel):
    section_name: str = Field(..., max_length=50, json_schema_extra={"example": "Balcony"})
    description: Optional[str] = Field(None, max_length=255)
    capacity: int


class VenueSectionCreate(VenueSectionBase):
    pass


class VenueSectionUpdate(BaseModel):
    section_name: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    capacity: Optional[int] = None


class VenueSection(VenueSectionBase):
    section_id: int
    venue_id: int

    model_config = {"from_attributes": True}
