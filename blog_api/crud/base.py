"""Generic CRUD base class for SQLAlchemy models."""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog_api.core.exceptions import StoreError
from blog_api.database import Base


ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def parse_id(value: Any) -> Optional[UUID]:
	"""Coerce a path id to a UUID; anything that is not one identifies no row."""
	if isinstance(value, UUID):
		return value
	try:
		return UUID(str(value))
	except (TypeError, ValueError):
		return None


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
	"""Reusable CRUD helper for SQLAlchemy models.

	All methods operate on model instances and return database objects, not schemas.
	Store failures roll the session back and are raised as `StoreError`.
	"""

	def __init__(self, model: Type[ModelType]):
		self.model = model

	def _commit(self, db: Session, db_obj: Optional[ModelType] = None) -> None:
		try:
			db.commit()
			if db_obj is not None:
				db.refresh(db_obj)
		except SQLAlchemyError as e:
			db.rollback()
			raise StoreError.from_exception(e) from e

	# ----- Read -----
	def get(self, db: Session, id: Any) -> Optional[ModelType]:
		"""Get one record by primary key."""
		pk = parse_id(id)
		if pk is None:
			return None
		try:
			return db.get(self.model, pk)
		except SQLAlchemyError as e:
			raise StoreError.from_exception(e) from e

	def get_multi(self, db: Session) -> List[ModelType]:
		"""Get all records in the store's default order."""
		try:
			return list(db.scalars(select(self.model)).all())
		except SQLAlchemyError as e:
			raise StoreError.from_exception(e) from e

	# ----- Create -----
	def create(self, db: Session, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
		"""Create a new record from a Pydantic schema or dict."""
		obj_in_data: Dict[str, Any] = obj_in.model_dump(exclude_unset=True) if isinstance(obj_in, BaseModel) else dict(obj_in)
		db_obj = self.model(**obj_in_data)  # type: ignore[arg-type]
		db.add(db_obj)
		self._commit(db, db_obj)
		return db_obj

	# ----- Update -----
	def update(
		self,
		db: Session,
		*,
		db_obj: ModelType,
		obj_in: Union[UpdateSchemaType, Dict[str, Any]],
	) -> ModelType:
		"""Update a record with the fields present in a Pydantic schema or dict.

		Fields the client did not send are left unmodified.
		"""
		update_data = obj_in.model_dump(exclude_unset=True) if isinstance(obj_in, BaseModel) else dict(obj_in)

		for field, value in update_data.items():
			if hasattr(db_obj, field):
				setattr(db_obj, field, value)
		if hasattr(db_obj, "updated_at"):
			db_obj.updated_at = func.now()

		db.add(db_obj)
		self._commit(db, db_obj)
		return db_obj

	# ----- Delete -----
	def delete(self, db: Session, *, id: Any) -> Optional[ModelType]:
		"""Hard delete a record.

		Returns the deleted object (or None if not found).
		"""
		db_obj = self.get(db, id)
		if not db_obj:
			return None

		db.delete(db_obj)
		self._commit(db)
		return db_obj
