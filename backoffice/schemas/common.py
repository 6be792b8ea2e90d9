import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from backoffice.constants import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_FIELD,
    DEFAULT_SORT_ORDER,
    MAX_LIMIT,
    MAX_PAGE,
)
from backoffice.utils.helpers import parse_int


class Pagination(BaseModel):
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


class PaginationMetadata(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class PageRequest(Pagination):
    """A browse request for one collection, already normalised."""

    search: str = ""
    sort_by: str = DEFAULT_SORT_FIELD
    sort_order: str = DEFAULT_SORT_ORDER

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def sort(self) -> List[tuple]:
        return [(self.sort_by, 1 if self.sort_order == "asc" else -1)]

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> "PageRequest":
        """Build a request from raw query strings, degrading bad values to defaults."""
        parsed_page = parse_int(page, DEFAULT_PAGE)
        parsed_limit = parse_int(limit, DEFAULT_LIMIT)
        if parsed_limit < 1:
            parsed_limit = DEFAULT_LIMIT

        return cls(
            page=min(max(parsed_page, 1), MAX_PAGE),
            limit=min(parsed_limit, MAX_LIMIT),
            search=(search or "").strip(),
            sort_by=(sort_by or "").strip() or DEFAULT_SORT_FIELD,
            sort_order="asc" if (sort_order or "").strip().lower() == "asc" else "desc",
        )


class PageResult(BaseModel):
    data: List[Dict[str, Any]]
    pagination: PaginationMetadata


def get_pagination_metadata(total: int, page: int, limit: int) -> PaginationMetadata:
    return PaginationMetadata(
        page=page,
        limit=limit,
        total=total,
        pages=math.ceil(total / limit),
    )
