from sqlalchemy.orm import Session
from uuid import uuid4

from eventdb import crud
from eventdb.models.user import User
from eventdb.schemas.user import UserCreate


def create_random_user(db: Session, **overrides) -> User:
    """
    Creates a dummy user with a unique username and email.
    """
    suffix = uuid4().hex[:8]
    data = {
        "username": f"user_{suffix}",
        "email": f"user_{suffix}@example.com",
        "password_hash": "$2b$12$placeholderhashplaceholderhashplaceholde",
        "first_name": "Test",
        "last_name": "User",
    }
    data.update(overrides)
    return crud.user.create(db, obj_in=UserCreate(**data))
