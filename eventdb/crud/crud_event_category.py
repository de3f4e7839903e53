from typing import Optional

from sqlalchemy.orm import Session

from eventdb.models.event_category import EventCategory
from eventdb.schemas.event import EventCategoryCreate, EventCategoryUpdate

from .base import CRUDBase


class CRUDEventCategory(CRUDBase[EventCategory, EventCategoryCreate, EventCategoryUpdate]):
    def get_by_name(self, db: Session, *, name: str) -> Optional[EventCategory]:
        return db.query(EventCategory).filter(EventCategory.name == name).first()


event_category = CRUDEventCategory(EventCategory)
