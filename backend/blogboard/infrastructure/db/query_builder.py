from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, func, inspect, or_, select
from sqlalchemy.orm import Session, aliased

from blogboard.application.errors import InvalidFieldError
from blogboard.domain.query_operators import SortOrder

ModelT = TypeVar("ModelT")


class SelectQueryBuilder(Generic[ModelT]):
    """
    Single-use builder over a SQLAlchemy select of one mapped entity.

    The primary entity is selected under ``alias`` so columns can be addressed
    as ``"field"`` or ``"<alias>.field"``. Relationships joined through
    :meth:`join` register their own alias and resolve the same way.
    """

    def __init__(self, db: Session, model: type[ModelT], alias: str | None = None) -> None:
        self.db = db
        self.model = model
        self.alias = alias or model.__name__.lower()
        self.entity = aliased(model, name=self.alias)
        self._models: dict[str, type] = {self.alias: model}
        self._entities: dict[str, Any] = {self.alias: self.entity}
        self._query: Select = select(self.entity)
        self._offset: int | None = None
        self._limit: int | None = None
        self._executed = False

    @property
    def statement(self) -> Select:
        return self._query.offset(self._offset).limit(self._limit)

    def join(self, relationship_name: str, alias: str | None = None, outer: bool = False) -> "SelectQueryBuilder[ModelT]":
        relationships = inspect(self.model).relationships
        if relationship_name not in relationships:
            raise InvalidFieldError(f"Unknown relationship '{relationship_name}' on {self.model.__name__}")
        join_alias = alias or relationship_name
        target_model = relationships[relationship_name].mapper.class_
        target_entity = aliased(target_model, name=join_alias)
        self._query = self._query.join(
            getattr(self.entity, relationship_name).of_type(target_entity),
            isouter=outer,
        )
        self._models[join_alias] = target_model
        self._entities[join_alias] = target_entity
        return self

    def column(self, path: str) -> Any:
        alias_name, _, field = path.rpartition(".")
        alias_name = alias_name or self.alias
        model = self._models.get(alias_name)
        if model is None:
            raise InvalidFieldError(f"Unknown query alias '{alias_name}'")
        if field not in inspect(model).column_attrs:
            raise InvalidFieldError(f"Unknown field '{field}' on '{alias_name}'")
        return getattr(self._entities[alias_name], field)

    def and_where(self, *criteria: ColumnElement[bool]) -> "SelectQueryBuilder[ModelT]":
        self._query = self._query.where(*criteria)
        return self

    def or_where_group(self, criteria: list[ColumnElement[bool]]) -> "SelectQueryBuilder[ModelT]":
        if criteria:
            self._query = self._query.where(or_(*criteria))
        return self

    def order_by(self, field: str, direction: SortOrder | str = SortOrder.desc) -> "SelectQueryBuilder[ModelT]":
        column = self.column(field)
        normalized = direction.value if isinstance(direction, SortOrder) else direction.lower()
        ordering = column.asc() if normalized == SortOrder.asc.value else column.desc()
        self._query = self._query.order_by(None).order_by(ordering)
        return self

    def skip(self, offset: int) -> "SelectQueryBuilder[ModelT]":
        self._offset = offset
        return self

    def take(self, limit: int) -> "SelectQueryBuilder[ModelT]":
        self._limit = limit
        return self

    def get_many_and_count(self) -> tuple[list[ModelT], int]:
        if self._executed:
            raise RuntimeError("Query builder has already been executed")
        self._executed = True

        count_query = select(func.count()).select_from(self._query.order_by(None).subquery())
        total = self.db.execute(count_query).scalar_one()
        rows = list(self.db.execute(self.statement).scalars().all())
        return rows, total
