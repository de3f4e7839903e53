# eventdb/crud/base.py
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from eventdb.core.exceptions import NotFound
from eventdb.db.base_class import Base
from eventdb.db.constraints import atomic

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Create, Read, Update, Delete.

        Every write runs inside ``atomic``: it either commits as a whole or
        rolls back and raises a DataModelError.

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.get(self.model, id)

    def get_or_raise(self, db: Session, id: Any) -> ModelType:
        db_obj = self.get(db, id)
        if db_obj is None:
            raise NotFound(self.model.__name__, id)
        return db_obj

    def get_multi(
        self, db: Session, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        pk = self.model.__mapper__.primary_key
        return db.query(self.model).order_by(*pk).offset(skip).limit(limit).all()

    def create(self, db: Session, *, obj_in: CreateSchemaType) -> ModelType:
        db_obj = self.model(**obj_in.model_dump())
        with atomic(db):
            db.add(db_obj)
        db.refresh(db_obj)
        logger.info(f"Created {self.model.__name__} {self._identity(db_obj)}")
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        with atomic(db):
            for field, value in update_data.items():
                setattr(db_obj, field, value)
            db.add(db_obj)
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, id: Any) -> None:
        db_obj = self.get_or_raise(db, id)
        with atomic(db):
            db.delete(db_obj)
        logger.info(f"Deleted {self.model.__name__} {id!r}")

    @staticmethod
    def _identity(db_obj) -> Any:
        identity = db_obj.__mapper__.primary_key_from_instance(db_obj)
        return identity[0] if len(identity) == 1 else tuple(identity)
