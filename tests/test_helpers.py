import math
import uuid
from datetime import datetime

import pytest
from bson import Decimal128, ObjectId

from backoffice.constants import MAX_PAGE
from backoffice.core.exceptions import BadRequestError
from backoffice.schemas.common import PageRequest, get_pagination_metadata
from backoffice.utils.helpers import parse_int, parse_object_id, to_jsonable


def test_to_jsonable_converts_bson_values():
    oid = ObjectId()
    uid = uuid.uuid4()

    result = to_jsonable(
        {
            "_id": oid,
            "createdAt": datetime(2024, 3, 5, 9, 7, 2),
            "salary": Decimal128("1500.50"),
            "photo": b"hi",
            "ref": uid,
            "score": math.nan,
            "nested": {"ids": [oid, 1, None]},
        }
    )

    assert result == {
        "_id": str(oid),
        "createdAt": "2024-03-05T09:07:02",
        "salary": "1500.50",
        "photo": "aGk=",
        "ref": str(uid),
        "score": None,
        "nested": {"ids": [str(oid), 1, None]},
    }


def test_parse_object_id():
    oid = ObjectId()

    assert parse_object_id(str(oid)) == oid
    with pytest.raises(BadRequestError):
        parse_object_id("not-an-id")


@pytest.mark.parametrize(
    "value, expected", [(None, 7), ("12", 12), (" 3 ", 3), ("abc", 7), ("1.5", 7)]
)
def test_parse_int(value, expected):
    assert parse_int(value, 7) == expected


def test_page_request_defaults():
    request = PageRequest.from_query()

    assert request.page == 1
    assert request.limit == 50
    assert request.search == ""
    assert request.sort == [("_id", -1)]
    assert request.skip == 0


@pytest.mark.parametrize(
    "kwargs, page, limit",
    [
        ({"page": "0"}, 1, 50),
        ({"page": "-4"}, 1, 50),
        ({"page": "abc", "limit": "xyz"}, 1, 50),
        ({"limit": "0"}, 1, 50),
        ({"limit": "5000"}, 1, 1000),
        ({"page": "3", "limit": "25"}, 3, 25),
    ],
)
def test_page_request_normalises_numbers(kwargs, page, limit):
    request = PageRequest.from_query(**kwargs)

    assert request.page == page
    assert request.limit == limit


def test_page_request_sort_and_skip():
    request = PageRequest.from_query(
        page="3", limit="50", sort_by="name", sort_order="ASC", search="  maria "
    )

    assert request.sort == [("name", 1)]
    assert request.skip == 100
    assert request.search == "maria"
    assert PageRequest.from_query(sort_order="upwards").sort == [("_id", -1)]


@pytest.mark.parametrize(
    "total, limit, pages", [(0, 50, 0), (1, 50, 1), (50, 50, 1), (120, 50, 3)]
)
def test_pagination_metadata(total, limit, pages):
    assert get_pagination_metadata(total, 1, limit).pages == pages


@pytest.mark.parametrize("limit", ["1", "50", "1000"])
def test_page_request_caps_page_to_a_64_bit_skip(limit):
    request = PageRequest.from_query(page="99999999999999999999", limit=limit)

    assert request.page == MAX_PAGE
    assert request.skip <= 2**63 - 1
