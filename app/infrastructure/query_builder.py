"""
Translate the typed filter vocabulary into SQLAlchemy criteria.
"""

from typing import Any, Iterable, List, Sequence, Type

from sqlalchemy import or_
from sqlalchemy.orm import Query
from sqlalchemy.orm.attributes import InstrumentedAttribute

from app.domain.queries import Contains, Equals, Filter, Range, Search, SortSpec


def _column(model: Type[Any], name: str) -> InstrumentedAttribute:
    attr = getattr(model, name, None)
    if not isinstance(attr, InstrumentedAttribute):
        raise ValueError(f"{model.__name__} has no column '{name}'")
    return attr


def _like(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def criterion(model: Type[Any], flt: Filter):
    """Build one SQL criterion for `flt` against `model`."""
    if isinstance(flt, Search):
        return or_(*(_column(model, f).ilike(_like(flt.term), escape="\\") for f in flt.fields))

    if isinstance(flt, Equals):
        if flt.via is None:
            return _column(model, flt.field) == flt.value
        relation = _column(model, flt.via)
        target = relation.property.mapper.class_
        return relation.has(_column(target, flt.field) == flt.value)

    if isinstance(flt, Contains):
        return _column(model, flt.field).ilike(_like(flt.value), escape="\\")

    if isinstance(flt, Range):
        column = _column(model, flt.field)
        bounds = []
        if flt.lower is not None:
            bounds.append(column >= flt.lower)
        if flt.upper is not None:
            bounds.append(column <= flt.upper)
        return bounds[0] if len(bounds) == 1 else bounds[0] & bounds[1]

    raise TypeError(f"Unsupported filter: {flt!r}")


def apply_filters(query: Query, model: Type[Any], filters: Iterable[Filter]) -> Query:
    criteria = [criterion(model, f) for f in filters]
    return query.filter(*criteria) if criteria else query


def order_clauses(model: Type[Any], specs: Sequence[SortSpec]) -> List[Any]:
    """ORDER BY clauses, always ending with the primary key for stable pages."""
    clauses = []
    for spec in specs:
        column = _column(model, spec.field)
        clauses.append(column.desc() if spec.descending else column.asc())
    clauses.append(model.id.desc() if not specs or specs[0].descending else model.id.asc())
    return clauses
