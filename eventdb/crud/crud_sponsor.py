# eventdb/crud/crud_sponsor.py
"""
CRUD operations for sponsors, sponsorship tiers and event sponsorships.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.orm import Session

from eventdb.core.exceptions import ConstraintViolation, DuplicateKey
from eventdb.db.constraints import atomic
from eventdb.models.sponsor import EventSponsor, Sponsor, SponsorshipTier
from eventdb.schemas.sponsor import (
    EventSponsorCreate,
    EventSponsorUpdate,
    SponsorCreate,
    SponsorshipTierCreate,
    SponsorshipTierUpdate,
    SponsorUpdate,
)

from .base import CRUDBase

logger = logging.getLogger(__name__)

TIER_MINIMUM_RULE = "event_sponsors_amount_meets_tier_minimum"


class CRUDSponsorshipTier(CRUDBase[SponsorshipTier, SponsorshipTierCreate, SponsorshipTierUpdate]):
    def get_by_name(self, db: Session, *, name: str) -> Optional[SponsorshipTier]:
        return db.query(SponsorshipTier).filter(SponsorshipTier.name == name).first()


class CRUDEventSponsor(CRUDBase[EventSponsor, EventSponsorCreate, EventSponsorUpdate]):
    """
    A sponsor holds exactly one tier per event; the pledged amount must reach
    the tier's minimum.
    """

    def add_to_event(
        self, db: Session, *, event_id: int, obj_in: EventSponsorCreate
    ) -> EventSponsor:
        if db.get(EventSponsor, (event_id, obj_in.sponsor_id)) is not None:
            raise DuplicateKey(
                "pk_event_sponsors",
                f"Sponsor {obj_in.sponsor_id} already sponsors event {event_id}",
            )
        db_obj = EventSponsor(**obj_in.model_dump(), event_id=event_id)
        with atomic(db):
            db.add(db_obj)
            db.flush()
            self._check_tier_minimum(db, db_obj)
        db.refresh(db_obj)
        logger.info(
            f"Sponsor {obj_in.sponsor_id} added to event {event_id} at tier {obj_in.tier_id}"
        )
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: EventSponsor,
        obj_in: Union[EventSponsorUpdate, Dict[str, Any]],
    ) -> EventSponsor:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        with atomic(db):
            for field, value in update_data.items():
                setattr(db_obj, field, value)
            db.flush()
            self._check_tier_minimum(db, db_obj)
        db.refresh(db_obj)
        return db_obj

    def get_by_event(self, db: Session, *, event_id: int) -> List[EventSponsor]:
        return (
            db.query(EventSponsor)
            .filter(EventSponsor.event_id == event_id)
            .order_by(EventSponsor.amount.desc(), EventSponsor.sponsor_id)
            .all()
        )

    @staticmethod
    def _check_tier_minimum(db: Session, db_obj: EventSponsor) -> None:
        tier = db.get(SponsorshipTier, db_obj.tier_id)
        # Row checks and foreign keys have already run in the flush
        if tier is None or db_obj.amount is None:
            return
        if db_obj.amount < tier.min_amount:
            raise ConstraintViolation(
                TIER_MINIMUM_RULE,
                f"Amount {db_obj.amount} is below the {tier.name} minimum {tier.min_amount}",
            )


sponsor = CRUDBase[Sponsor, SponsorCreate, SponsorUpdate](Sponsor)
sponsorship_tier = CRUDSponsorshipTier(SponsorshipTier)
event_sponsor = CRUDEventSponsor(EventSponsor)
