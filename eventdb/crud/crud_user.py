# eventdb/crud/crud_user.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from eventdb.core.exceptions import DuplicateKey, NotFound
from eventdb.db.constraints import atomic
from eventdb.models.user import Role, User, UserRoleAssignment
from eventdb.schemas.user import RoleCreate, RoleUpdate, UserCreate, UserUpdate

from .base import CRUDBase

logger = logging.getLogger(__name__)


class CRUDUser(CRUDBase[User, UserCreate, UserUpdate]):
    def get_by_username(self, db: Session, *, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    def get_by_email(self, db: Session, *, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    def deactivate(self, db: Session, *, user_id: int) -> User:
        """
        Soft-deletes a user. Referenced users cannot be hard-deleted, so this
        is the supported way to retire an account.
        """
        user = self.get_or_raise(db, user_id)
        with atomic(db):
            user.is_active = False
        db.refresh(user)
        logger.info(f"Deactivated user {user_id}")
        return user

    def assign_role(self, db: Session, *, user_id: int, role_id: int) -> UserRoleAssignment:
        if db.get(UserRoleAssignment, (user_id, role_id)) is not None:
            raise DuplicateKey(
                "pk_user_role_mapping", f"User {user_id} already holds role {role_id}"
            )
        assignment = UserRoleAssignment(user_id=user_id, role_id=role_id)
        with atomic(db):
            db.add(assignment)
        db.refresh(assignment)
        logger.info(f"Assigned role {role_id} to user {user_id}")
        return assignment

    def revoke_role(self, db: Session, *, user_id: int, role_id: int) -> None:
        assignment = db.get(UserRoleAssignment, (user_id, role_id))
        if assignment is None:
            raise NotFound("UserRoleAssignment", (user_id, role_id))
        with atomic(db):
            db.delete(assignment)

    def get_roles(self, db: Session, *, user_id: int) -> List[Role]:
        return (
            db.query(Role)
            .join(UserRoleAssignment, UserRoleAssignment.role_id == Role.role_id)
            .filter(UserRoleAssignment.user_id == user_id)
            .order_by(Role.role_name)
            .all()
        )


class CRUDRole(CRUDBase[Role, RoleCreate, RoleUpdate]):
    def get_by_name(self, db: Session, *, role_name: str) -> Optional[Role]:
        return db.query(Role).filter(Role.role_name == role_name).first()


user = CRUDUser(User)
role = CRUDRole(Role)
