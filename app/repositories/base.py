"""
Shared repository helpers for writes that run inside atams transaction()
"""
from typing import Any, Dict, TypeVar

from sqlalchemy.orm import Session

from atams.db import Base, BaseRepository

ModelType = TypeVar("ModelType", bound=Base)


class HrisRepository(BaseRepository[ModelType]):
    """
    BaseRepository with flush-only writes

    The inherited ORM methods commit immediately. add() and apply() only flush,
    so several of them can be grouped under one `with transaction(db):` block.
    """

    def add(self, db: Session, obj_in: Dict[str, Any]) -> ModelType:
        """Insert without committing, returns the row with its generated id"""
        db_obj = self.model(**obj_in)
        db.add(db_obj)
        db.flush()
        return db_obj

    def apply(self, db: Session, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        """Update without committing"""
        for field, value in obj_in.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        db.add(db_obj)
        db.flush()
        return db_obj
