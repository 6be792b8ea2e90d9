from datetime import datetime

import pytest

from backoffice.renderer.cells import ValueKind, classify_value
from backoffice.renderer.formatting import format_bytes
from backoffice.renderer.tables import (
    PaginationBar,
    build_dashboard,
    build_search_table,
    build_table,
)
from backoffice.schemas.collections import (
    CollectionDescriptor,
    DatabaseStats,
    DatabaseSummary,
)
from backoffice.schemas.common import get_pagination_metadata


@pytest.mark.parametrize(
    "value, kind, text",
    [
        (None, ValueKind.NULL, "null"),
        (datetime(2024, 3, 5, 9, 7, 2), ValueKind.DATE, "5/3/2024, 9:07:02"),
        ("2024-03-05T09:07:02Z", ValueKind.DATE, "5/3/2024, 9:07:02"),
        (True, ValueKind.BOOL, "true"),
        (False, ValueKind.BOOL, "false"),
        ({"a": 1, "b": 2}, ValueKind.OBJECT, "{2 fields}"),
        ([1, 2, 3], ValueKind.ARRAY, "[3 items]"),
        ("65f0c0ffee00000000000abc", ValueKind.IDENTIFIER, "65f0c0ffee00000000000abc"),
        ("Maria", ValueKind.STRING, "Maria"),
        (42, ValueKind.STRING, "42"),
    ],
)
def test_classify_value(value, kind, text):
    cell = classify_value(value)

    assert cell.kind == kind
    assert cell.text == text


def test_classify_value_truncates_long_strings():
    cell = classify_value("x" * 150)

    assert cell.kind == ValueKind.STRING
    assert cell.text == "x" * 100 + "..."


def test_classify_value_date_like_prefix_without_valid_date():
    cell = classify_value("2024-13-45T99:99:99")

    assert cell.kind == ValueKind.STRING


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 Bytes"),
        (None, "0 Bytes"),
        (500, "500 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1048576, "1 MB"),
        (1234567, "1.18 MB"),
        (1073741824, "1 GB"),
    ],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_build_table_uses_union_of_keys_in_first_seen_order():
    table = build_table([{"_id": "1", "a": 1}, {"_id": "2", "b": True}])

    assert table.columns == ["_id", "a", "b"]
    assert table.hidden_columns == 0
    assert [cell.kind for cell in table.rows[0].cells] == [
        ValueKind.STRING,
        ValueKind.STRING,
        ValueKind.NULL,
    ]
    assert table.rows[1].document_id == "2"


def test_build_table_caps_columns():
    document = {f"field{i}": i for i in range(12)}

    table = build_table([document])

    assert len(table.columns) == 10
    assert table.hidden_columns == 2
    assert len(table.rows[0].cells) == 10


def test_build_table_empty():
    table = build_table([])

    assert table.is_empty
    assert table.columns == []


def test_build_search_table_takes_columns_from_first_match():
    table = build_search_table(
        [{"a": 1, "b": 2, "c": 3, "d": 4, "e": 5, "f": 6}, {"z": 1}]
    )

    assert table.columns == ["a", "b", "c", "d", "e"]
    assert table.rows[1].cells[0].kind == ValueKind.NULL


def test_pagination_bar():
    single = PaginationBar.from_metadata(get_pagination_metadata(20, 1, 50))
    middle = PaginationBar.from_metadata(get_pagination_metadata(120, 2, 50))
    last = PaginationBar.from_metadata(get_pagination_metadata(120, 3, 50))

    assert not single.visible
    assert middle.visible and middle.has_previous and middle.has_next
    assert last.has_previous and not last.has_next


def _stats(*names):
    return DatabaseStats(
        database=DatabaseSummary(
            name="vynehr", collections=len(names), dataSize=1536, indexSize=0
        ),
        collections=[
            CollectionDescriptor(name=name, count=3, size=2048, indexes=1)
            for name in names
        ],
    )


def test_build_dashboard():
    dashboard = build_dashboard(
        _stats("candidates", "cvs.files", "cvs.chunks", "job offers"), "cvs"
    )

    assert [card.title for card in dashboard.stat_cards[:4]] == [
        "Database",
        "Data size",
        "Indexes",
        "Total storage",
    ]
    assert dashboard.stat_cards[0].value == "vynehr"
    assert dashboard.stat_cards[1].value == "1.5 KB"
    assert dashboard.stat_cards[2].value == "0 Bytes"
    assert len(dashboard.stat_cards) == 8

    titles = [card.title for card in dashboard.collection_cards]
    assert titles == ["candidates", "job offers", "GridFS (cvs)"]
    targets = [card.target for card in dashboard.collection_cards]
    assert targets == [
        "/ui/collections/candidates",
        "/ui/collections/job%20offers",
        "/ui/gridfs",
    ]


def test_build_dashboard_without_bucket():
    dashboard = build_dashboard(_stats("candidates"), "cvs")

    assert [card.title for card in dashboard.collection_cards] == ["candidates"]
