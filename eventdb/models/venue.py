# eventdb/models/venue.py
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from eventdb.db.base_class import Base
from eventdb.db.constraints import RowCheck
from eventdb.models.mixins import TimestampMixin


class Venue(TimestampMixin, Base):
    __tablename__ = "venues"

    venue_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    address = Column(String(255), nullable=False)
    city = Column(String(50), nullable=False)
    state = Column(String(50), nullable=False)
    country = Column(String(50), nullable=False)
    postal_code = Column(String(20), nullable=False)
    capacity = Column(Integer, nullable=False)
    description = Column(Text, nullable=True)

    # Sections live and die with their venue
    sections = relationship(
        "VenueSection",
        back_populates="venue",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="VenueSection.section_id",
    )

    __table_args__ = (
        CheckConstraint("capacity > 0", name="capacity_positive"),
        {"comment": "Stores venue information for events"},
    )

    __row_checks__ = (
        RowCheck("ck_venues_capacity_positive", ("capacity",), lambda capacity: capacity > 0),
    )


class VenueSection(Base):
    __tablename__ = "venue_sections"

    section_id = Column(Integer, primary_key=True, autoincrement=True)
    venue_id = Column(
        Integer,
        ForeignKey("venues.venue_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    section_name = Column(String(50), nullable=False)
    description = Column(String(255), nullable=True)
    capacity = Column(Integer, nullable=False)

    venue = relationship("Venue", back_populates="sections")

    __table_args__ = (
        CheckConstraint("capacity > 0", name="capacity_positive"),
        {"comment": "Defines sections within venues for seat management"},
    )

    __row_checks__ = (
        RowCheck(
            "ck_venue_sections_capacity_positive",
            ("capacity",),
            lambda capacity: capacity > 0,
        ),
    )
