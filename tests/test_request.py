"""Unit tests for request parsing (modern and legacy parameter forms)."""
from __future__ import annotations

from decimal import Decimal

import pytest

from pagesql.compile.builder import StatementBuilder
from pagesql.schema.request import DataTableRequest, to_bool, to_int
from pagesql.schema.statements import StatementKey
from tests.fixtures import LEGACY_ORGS_PARAMS, ORGS_COLUMNS, orgs_request


@pytest.mark.parametrize(
    "value, expected",
    [
        ("10", 10),
        (" 7 ", 7),
        (3, 3),
        (4.0, 4),
        (Decimal("12"), 12),
        (4.5, None),
        ("abc", None),
        (True, None),
        (None, None),
    ],
)
def test_to_int(value, expected):
    assert to_int(value) == expected


def test_to_bool():
    assert to_bool("true") is True
    assert to_bool("TRUE") is True
    assert to_bool(True) is True
    assert to_bool("false") is False
    assert to_bool("yes") is False
    assert to_bool(1) is False


class TestParse:
    def test_string_values_are_coerced(self):
        req = DataTableRequest.parse(orgs_request(draw="3", start="10", length="25"))
        assert req.draw == 3
        assert req.start == 10
        assert req.length == 25
        assert [c.name for c in req.columns] == ORGS_COLUMNS
        assert all(c.searchable and c.orderable for c in req.columns)

    def test_malformed_draw_defaults_to_zero(self):
        assert DataTableRequest.parse({"draw": "x1"}).draw == 0
        assert DataTableRequest.parse({}).draw == 0

    def test_search_given_as_plain_string(self):
        req = DataTableRequest.parse({"search": "acme"})
        assert req.search.value == "acme"

    def test_order_direction_alias(self):
        req = DataTableRequest.parse({"order": [{"column": "1", "dir": "desc"}]})
        assert req.order[0].column == 1
        assert req.order[0].direction == "desc"

    def test_non_mapping_is_none(self):
        assert DataTableRequest.parse("start=0") is None

    def test_existing_request_passes_through(self):
        req = DataTableRequest()
        assert DataTableRequest.parse(req) is req

    def test_unknown_keys_are_ignored(self):
        req = DataTableRequest.parse({"_": "1349495139702", "draw": "2"})
        assert req.draw == 2


class TestLegacy:
    def test_legacy_parameters_with_column_names(self):
        req = DataTableRequest.from_legacy(LEGACY_ORGS_PARAMS, column_names=ORGS_COLUMNS)
        assert req.draw == 1
        assert req.start == 0
        assert req.length == 4
        assert [c.column_name for c in req.columns] == ORGS_COLUMNS
        assert req.order[0].column == 0
        assert req.order[0].direction == "asc"

    def test_legacy_request_compiles(self, orgs_default):
        params = dict(LEGACY_ORGS_PARAMS, sSearch="hello", iSortCol_0="2", sSortDir_0="desc")
        req = DataTableRequest.from_legacy(params, column_names=ORGS_COLUMNS)
        r = StatementBuilder(orgs_default).build(req)
        assert StatementKey.RECORDS_FILTERED in r
        assert r[StatementKey.SELECT].endswith("ORDER BY support DESC LIMIT 0, 4;")

    def test_legacy_names_from_mdataprop(self, orgs_default):
        params = {
            "mDataProp_0": "o",
            "bSortable_0": "true",
            "iSortingCols": "1",
            "iSortCol_0": "0",
            "sSortDir_0": "desc",
        }
        req = DataTableRequest.from_legacy(params)
        assert len(req.columns) == 1
        r = StatementBuilder(orgs_default).build(req)
        assert r[StatementKey.SELECT] == "SELECT * FROM Orgs ORDER BY o DESC;"

    def test_numeric_mdataprop_is_not_a_name(self):
        req = DataTableRequest.from_legacy(LEGACY_ORGS_PARAMS)
        assert len(req.columns) == 4
        assert all(c.column_name is None for c in req.columns)
