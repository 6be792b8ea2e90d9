"""
View models for the HTML tables: documents are turned into rows of
classified cells before they reach a template.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from backoffice.constants import MAX_SEARCH_COLUMNS, MAX_TABLE_COLUMNS
from backoffice.renderer.cells import Cell, classify_value
from backoffice.renderer.formatting import format_bytes
from backoffice.schemas.collections import DatabaseStats
from backoffice.schemas.common import PaginationMetadata


@dataclass
class Row:
    cells: List[Cell]
    document_id: Optional[str] = None


@dataclass
class Table:
    columns: List[str]
    rows: List[Row]
    hidden_columns: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.rows


def _document_keys(documents: List[Dict[str, Any]]) -> List[str]:
    keys: Dict[str, None] = {}
    for doc in documents:
        for key in doc:
            keys.setdefault(key, None)
    return list(keys)


def _row(doc: Dict[str, Any], columns: List[str]) -> Row:
    document_id = doc.get("_id")
    return Row(
        cells=[classify_value(doc.get(key)) for key in columns],
        document_id=str(document_id) if document_id is not None else None,
    )


def build_table(
    documents: List[Dict[str, Any]], max_columns: int = MAX_TABLE_COLUMNS
) -> Table:
    """Columns are the union of keys in first-seen order, capped at ``max_columns``."""
    keys = _document_keys(documents)
    columns = keys[:max_columns]
    return Table(
        columns=columns,
        rows=[_row(doc, columns) for doc in documents],
        hidden_columns=len(keys) - len(columns),
    )


def build_search_table(
    documents: List[Dict[str, Any]], max_columns: int = MAX_SEARCH_COLUMNS
) -> Table:
    """Columns come from the first match only."""
    if not documents:
        return Table(columns=[], rows=[])
    columns = list(documents[0])[:max_columns]
    return Table(columns=columns, rows=[_row(doc, columns) for doc in documents])


@dataclass
class PaginationBar:
    page: int
    pages: int
    total: int

    @classmethod
    def from_metadata(cls, metadata: PaginationMetadata) -> "PaginationBar":
        return cls(page=metadata.page, pages=metadata.pages, total=metadata.total)

    @property
    def visible(self) -> bool:
        return self.pages > 1

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


@dataclass
class Card:
    title: str
    value: str
    subtitle: str
    target: Optional[str] = None


@dataclass
class Dashboard:
    stat_cards: List[Card] = field(default_factory=list)
    collection_cards: List[Card] = field(default_factory=list)


def build_dashboard(stats: DatabaseStats, bucket_name: str) -> Dashboard:
    """Database cards, per-collection cards and the browsable collection grid.

    GridFS internals (any name with a dot) are left out of the grid; the
    bucket's files collection gets a card of its own instead.
    """
    database = stats.database
    dashboard = Dashboard(
        stat_cards=[
            Card("Database", database.name, f"{database.collections} collections"),
            Card("Data size", format_bytes(database.dataSize), "Storage"),
            Card("Indexes", format_bytes(database.indexSize), "Index size"),
            Card("Total storage", format_bytes(database.storageSize), "Space used"),
        ]
    )
    dashboard.stat_cards.extend(
        Card(collection.name, str(collection.count), format_bytes(collection.size))
        for collection in stats.collections
    )

    for collection in stats.collections:
        if "." in collection.name:
            continue
        dashboard.collection_cards.append(
            Card(
                collection.name,
                str(collection.count),
                f"{format_bytes(collection.size)} · {collection.indexes} indexes",
                target=f"/ui/collections/{quote(collection.name)}",
            )
        )

    files_collection = f"{bucket_name}.files"
    for collection in stats.collections:
        if collection.name == files_collection:
            dashboard.collection_cards.append(
                Card(
                    f"GridFS ({bucket_name})",
                    str(collection.count),
                    "Stored files",
                    target="/ui/gridfs",
                )
            )
    return dashboard
