#eventdb/crud/crud_venue.py
from typing import List

from sqlalchemy.orm import Session

from eventdb.db.constraints import atomic
from eventdb.models.venue import Venue, VenueSection
from eventdb.schemas.venue import (
    VenueCreate,
    VenueSectionCreate,
    VenueSectionUpdate,
    VenueUpdate,
)

from .base import CRUDBase


class CRUDVenue(CRUDBase[Venue, VenueCreate, VenueUpdate]):
    def add_section(
        self, db: Session, *, venue_id: int, obj_in: VenueSectionCreate
    ) -> VenueSection:
        section = VenueSection(**obj_in.model_dump(), venue_id=venue_id)
        with atomic(db):
            db.add(section)
        db.refresh(section)
        return section

    def get_sections(self, db: Session, *, venue_id: int) -> List[VenueSection]:
        return (
            db.query(VenueSection)
            .filter(VenueSection.venue_id == venue_id)
            .order_by(VenueSection.section_id)
            .all()
        )

    def update_section(
        self, db: Session, *, section_id: int, obj_in: VenueSectionUpdate
    ) -> VenueSection:
        return venue_section.update(
            db, db_obj=venue_section.get_or_raise(db, section_id), obj_in=obj_in
        )

    def remove_section(self, db: Session, *, section_id: int) -> None:
        venue_section.remove(db, id=section_id)


venue_section = CRUDBase[VenueSection, VenueSectionCreate, VenueSectionUpdate](VenueSection)
venue = CRUDVenue(Venue)
