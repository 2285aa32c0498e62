"""
Catalog listing: translate URL query parameters into filtered, sorted and
paginated SQLAlchemy queries.

Each list endpoint declares one ``CatalogQuery``. Parameters that are empty,
unknown or carry a value outside what the endpoint accepts are dropped rather
than rejected, so a listing request never fails on its query string.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import JSON, String, column, func, or_, select
from sqlalchemy.orm import Query, Session

from app.core.config import settings

logger = logging.getLogger(__name__)

ALL = "All"
SORT_ORDERS = ("asc", "desc")


@dataclass
class EnumFilter:
    """Exact match of a query parameter against a closed set of values."""

    column: Any
    values: Sequence[str]


@dataclass
class CatalogParams:
    search: Optional[str] = None
    filters: Dict[str, str] = field(default_factory=dict)
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    featured: Optional[bool] = None
    tags: List[str] = field(default_factory=list)
    sort_by: str = ""
    sort_order: str = "asc"
    page: int = 1
    limit: int = 12


def _parse_float(value: Optional[str]) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _pattern(term: str) -> str:
    return f"%{_escape_like(term)}%"


def _is_json(expression: Any) -> bool:
    return isinstance(expression.expression.type, JSON)


def _json_elements(expression: Any, dialect: str):
    """Table of the text values of a JSON array column, one row per element."""
    if dialect == "postgresql":
        elements = func.json_array_elements_text(expression)
    else:
        elements = func.json_each(expression)
    return elements.table_valued(column("value", String))


def _any_element(expression: Any, dialect: str, condition):
    elements = _json_elements(expression, dialect)
    return select(elements.c.value).where(condition(elements.c.value)).exists()


class CatalogQuery:
    """Filter, sort and paginate contract for one list endpoint."""

    def __init__(
        self,
        model: Any,
        *,
        search_columns: Sequence[Any],
        sort_fields: Mapping[str, Any],
        default_sort: str,
        default_order: str = "asc",
        enum_filters: Optional[Mapping[str, EnumFilter]] = None,
        price_column: Any = None,
        tags_column: Any = None,
        featured_column: Any = None,
        base_filters: Sequence[Any] = (),
    ):
        self.model = model
        self.search_columns = list(search_columns)
        self.sort_fields = dict(sort_fields)
        self.default_sort = default_sort
        self.default_order = default_order
        self.enum_filters = dict(enum_filters or {})
        self.price_column = price_column
        self.tags_column = tags_column
        self.featured_column = featured_column
        self.base_filters = list(base_filters)

    def parse(self, params: Mapping[str, str]) -> CatalogParams:
        """Keep only recognised, well-formed parameters."""
        raw = {key: value.strip() for key, value in params.items() if value is not None and value.strip()}
        parsed = CatalogParams(sort_by=self.default_sort, sort_order=self.default_order)

        if self.search_columns and raw.get("search"):
            parsed.search = raw["search"]

        for name, enum_filter in self.enum_filters.items():
            value = raw.get(name)
            if value and value != ALL and value in enum_filter.values:
                parsed.filters[name] = value

        if self.price_column is not None:
            parsed.min_price = _parse_float(raw.get("minPrice"))
            parsed.max_price = _parse_float(raw.get("maxPrice"))

        if self.featured_column is not None:
            parsed.featured = _parse_bool(raw.get("featured"))

        if self.tags_column is not None and raw.get("tags"):
            parsed.tags = [tag.strip().lower() for tag in raw["tags"].split(",") if tag.strip()]

        if raw.get("sortBy") in self.sort_fields:
            parsed.sort_by = raw["sortBy"]
        if raw.get("sortOrder") in SORT_ORDERS:
            parsed.sort_order = raw["sortOrder"]

        page = _parse_int(raw.get("page"))
        parsed.page = page if page and page > 0 else 1

        limit = _parse_int(raw.get("limit"))
        if limit is None or limit < 1:
            limit = settings.default_page_size
        parsed.limit = min(limit, settings.max_page_size)

        return parsed

    def build(self, db: Session, params: CatalogParams) -> Query:
        """Filtered query without ordering or pagination."""
        dialect = db.get_bind().dialect.name
        query = db.query(self.model)
        for condition in self.base_filters:
            query = query.filter(condition)

        if params.search:
            terms = params.search.split()
            query = query.filter(or_(*[
                self._contains(searched, term, dialect)
                for term in terms
                for searched in self.search_columns
            ]))

        for name, value in params.filters.items():
            query = query.filter(self.enum_filters[name].column == value)

        if params.min_price is not None:
            query = query.filter(self.price_column >= params.min_price)
        if params.max_price is not None:
            query = query.filter(self.price_column <= params.max_price)

        if params.featured is not None:
            query = query.filter(self.featured_column == params.featured)

        if params.tags:
            query = query.filter(_any_element(
                self.tags_column, dialect, lambda value: func.lower(value).in_(params.tags)
            ))

        return query

    @staticmethod
    def _contains(expression: Any, term: str, dialect: str):
        """Case-insensitive substring match; JSON arrays match on any element."""
        if _is_json(expression):
            return _any_element(expression, dialect, lambda value: value.ilike(_pattern(term), escape="\\"))
        return expression.ilike(_pattern(term), escape="\\")

    def execute(self, db: Session, params: CatalogParams) -> Tuple[List[Any], Dict[str, int]]:
        """Run the listing and return the page of items with pagination info."""
        query = self.build(db, params)
        total = query.count()

        sort_column = self.sort_fields[params.sort_by]
        if params.sort_order == "desc":
            query = query.order_by(sort_column.desc(), self.model.id.desc())
        else:
            query = query.order_by(sort_column.asc(), self.model.id.asc())

        items = query.offset((params.page - 1) * params.limit).limit(params.limit).all()
        logger.debug(
            "Listed %s: %d of %d (page %d)",
            self.model.__tablename__, len(items), total, params.page
        )

        return items, {
            "page": params.page,
            "limit": params.limit,
            "total": total,
            "pages": math.ceil(total / params.limit),
        }
