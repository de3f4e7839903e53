# eventdb/schemas/sponsor.py
"""
Pydantic schemas for sponsor management.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


# ============================================
# Sponsor Schemas
# ============================================

class SponsorBase(BaseModel):
    name: str = Field(..., max_length=100)
    description: Optional[str] = None
    logo_url: Optional[str] = Field(None, max_length=255)
    website_url: Optional[str] = Field(None, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)


class SponsorCreate(SponsorBase):
    pass


class SponsorUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    logo_url: Optional[str] = Field(None, max_length=255)
    website_url: Optional[str] = Field(None, max_length=255)
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = Field(None, max_length=20)


class Sponsor(SponsorBase):
    sponsor_id: int

    model_config = {"from_attributes": True}


# ============================================
# Sponsorship Tier Schemas
# ============================================

class SponsorshipTierBase(BaseModel):
    name: str = Field(..., max_length=50, json_schema_extra={"example": "Gold"})
    description: Optional[str] = Field(None, max_length=255)
    min_amount: Decimal
    benefits: Optional[str] = None


class SponsorshipTierCreate(SponsorshipTierBase):
    pass


class SponsorshipTierUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = Field(None, max_length=255)
    min_amount: Optional[Decimal] = None
    benefits: Optional[str] = None


class SponsorshipTier(SponsorshipTierBase):
    tier_id: int

    model_config = {"from_attributes": True}


# ============================================
# Event Sponsor Schemas
# ============================================

class EventSponsorCreate(BaseModel):
    sponsor_id: int
    tier_id: int
    amount: Decimal
    agreement_details: Optional[str] = None


class EventSponsorUpdate(BaseModel):
    tier_id: Optional[int] = None
    amount: Optional[Decimal] = None
    agreement_details: Optional[str] = None


class EventSponsor(EventSponsorCreate):
    event_id: int

    model_config = {"from_attributes": True}
