"""
Generic record store with common CRUD operations.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class RecordStore(Generic[ModelType]):
    """
    Persistence for one mapped entity class.

    The store works against the session it is given and never commits;
    committing is left to the caller.
    """

    def __init__(self, session: Session, model_class: Type[ModelType]) -> None:
        """
        Args:
            session: SQLAlchemy session backing the store
            model_class: The mapped class this store reads and writes
        """
        self.session = session
        self.model_class = model_class
        self.model_name = model_class.__name__

    def save(self, entity: ModelType) -> None:
        """
        Insert a new record.

        The session is flushed so the surrogate key is assigned on return.
        """
        self.session.add(entity)
        self.session.flush()
        logger.debug("Saved %s: %s", self.model_name, entity.id)

    def update(self, entity: ModelType) -> ModelType:
        """
        Copy the state of ``entity`` onto the stored record with the same id.

        Returns:
            The managed instance holding the merged state
        """
        managed = self.session.merge(entity)
        self.session.flush()
        logger.debug("Updated %s: %s", self.model_name, managed.id)
        return managed

    def delete(self, entity: ModelType) -> None:
        """
        Remove the record matching ``entity``.

        The entity is merged first so a detached instance still targets
        the managed row.
        """
        managed = self.session.merge(entity)
        self.session.delete(managed)
        self.session.flush()
        logger.debug("Deleted %s: %s", self.model_name, managed.id)

    def find_by_id(self, id: Any) -> Optional[ModelType]:
        """
        Returns:
            The record with the given id, or None if there is none
        """
        if id is None:
            return None

        instance = self.session.get(self.model_class, id)
        if instance is None:
            logger.debug("%s not found: %s", self.model_name, id)
        return instance

    def find_all(self) -> List[ModelType]:
        stmt = select(self.model_class).order_by(*self._primary_key())
        return list(self.session.execute(stmt).scalars().all())

    def find_by(self, **criteria: Any) -> List[ModelType]:
        """Records whose columns equal every given value."""
        stmt = (
            select(self.model_class)
            .where(*self._criteria(criteria))
            .order_by(*self._primary_key())
        )
        return list(self.session.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(self.model_class)
        return self.session.execute(stmt).scalar() or 0

    def count_by(self, **criteria: Any) -> int:
        stmt = (
            select(func.count())
            .select_from(self.model_class)
            .where(*self._criteria(criteria))
        )
        return self.session.execute(stmt).scalar() or 0

    def _criteria(self, criteria):
        return [getattr(self.model_class, key) == value for key, value in criteria.items()]

    def _primary_key(self):
        return self.model_class.__mapper__.primary_key
