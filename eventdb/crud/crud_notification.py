# eventdb/crud/crud_notification.py
from typing import List

from sqlalchemy import update
from sqlalchemy.orm import Session

from eventdb.db.constraints import atomic
from eventdb.models.notification import Notification
from eventdb.schemas.notification import NotificationCreate

from .base import CRUDBase


class CRUDNotification(CRUDBase[Notification, NotificationCreate, NotificationCreate]):
    """
    Notification rows are written here and consumed by the delivery service,
    which only ever flips is_read.
    """

    def create_for_user(
        self, db: Session, *, obj_in: NotificationCreate, user_id: int
    ) -> Notification:
        db_obj = Notification(**obj_in.model_dump(), user_id=user_id)
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def get_by_user(
        self, db: Session, *, user_id: int, unread_only: bool = False
    ) -> List[Notification]:
        query = db.query(Notification).filter(Notification.user_id == user_id)
        if unread_only:
            query = query.filter(Notification.is_read.is_(False))
        return query.order_by(
            Notification.sent_at.desc(), Notification.notification_id.desc()
        ).all()

    def mark_read(self, db: Session, *, notification_id: int) -> Notification:
        db_obj = self.get_or_raise(db, notification_id)
        with atomic(db):
            db_obj.is_read = True
        db.refresh(db_obj)
        return db_obj

    def mark_all_read(self, db: Session, *, user_id: int) -> int:
        """Marks every unread notification of a user as read; returns how many."""
        with atomic(db):
            result = db.execute(
                update(Notification)
                .where(Notification.user_id == user_id, Notification.is_read.is_(False))
                .values(is_read=True)
                .execution_options(synchronize_session=False)
            )
        return result.rowcount


notification = CRUDNotification(Notification)
