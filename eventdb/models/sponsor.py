# eventdb/models/sponsor.py
"""
Sponsorship models.

A sponsor is an organisation profile independent of any event. Tiers are
static reference data (Gold, Silver, ...). EventSponsor records the actual
deal: which tier a sponsor holds at an event and what it pledged. The
(event, sponsor) pair is the primary key, so a sponsor holds one tier per
event. Deals disappear with the event but block deletion of the sponsor or
tier they name.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck


class Sponsor(Base):
    __tablename__ = "sponsors"
    __table_args__ = {"comment": "Information about event sponsors"}

    sponsor_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    logo_url = Column(String(255), nullable=True)
    website_url = Column(String(255), nullable=True)
    contact_email = Column(String(100), nullable=True)
    contact_phone = Column(String(20), nullable=True)

    sponsorships = relationship(
        "EventSponsor", back_populates="sponsor", passive_deletes="all"
    )


class SponsorshipTier(Base):
    __tablename__ = "sponsorship_tiers"

    tier_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(String(255), nullable=True)
    min_amount = Column(Numeric(10, 2), nullable=False)
    benefits = Column(Text, nullable=True)

    sponsorships = relationship("EventSponsor", back_populates="tier", passive_deletes="all")

    __table_args__ = (
        CheckConstraint("min_amount >= 0", name="min_amount_non_negative"),
        {"comment": "Defines different sponsorship tiers"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_sponsorship_tiers_min_amount_non_negative",
            ("min_amount",),
            lambda amount: amount >= 0,
        ),
    )


class EventSponsor(Base):
    __tablename__ = "event_sponsors"

    event_id = Column(
        Integer, ForeignKey("events.event_id", ondelete="CASCADE"), primary_key=True
    )
    sponsor_id = Column(
        Integer, ForeignKey("sponsors.sponsor_id", ondelete="RESTRICT"), primary_key=True
    )
    tier_id = Column(
        Integer,
        ForeignKey("sponsorship_tiers.tier_id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    amount = Column(Numeric(10, 2), nullable=False)
    agreement_details = Column(Text, nullable=True)

    event = relationship("Event", back_populates="sponsorships")
    sponsor = relationship("Sponsor", back_populates="sponsorships")
    tier = relationship("SponsorshipTier", back_populates="sponsorships")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="amount_non_negative"),
        {"comment": "Maps sponsors to events with tier information"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_event_sponsors_amount_non_negative",
            ("amount",),
            lambda amount: amount >= 0,
        ),
    )
