"""Unit tests for ResponseMapper."""
from __future__ import annotations

import sqlite3

import pytest

import pagesql
from pagesql.compile.builder import StatementBuilder
from pagesql.respond.mapper import ResponseMapper, extract_count
from pagesql.schema.statements import CompiledStatements, RequestContext
from pagesql.schema.table import TableConfig
from tests.fixtures import orgs_request

ROWS = [
    {"o": "acme", "cn": "Acme Inc", "support": "gold", "email": "a@acme.test"},
    {"o": "init", "cn": "Initech", "support": "none", "email": "b@initech.test"},
]


def _compiled(draw: int = 3) -> CompiledStatements:
    return CompiledStatements(context=RequestContext(draw=draw, start=0, length=10))


@pytest.mark.parametrize(
    "rows, expected",
    [
        ([{"COUNT(id)": 57}], 57),
        ([(12,)], 12),
        ([[8, "ignored"]], 8),
        ([{"count": "42"}], 42),
        ([], 0),
        (None, 0),
        ("57", 0),
        ([{}], 0),
        ([()], 0),
        ([57], 0),
        ([{"count": "many"}], 0),
    ],
)
def test_extract_count(rows, expected):
    assert extract_count(rows) == expected


class TestResponseMapper:
    def test_counts_and_rows(self, orgs_default):
        results = {"recordsTotal": [{"COUNT(id)": 57}], "select": ROWS}
        resp = ResponseMapper(orgs_default).map(_compiled(), results)
        assert resp.draw == 3
        assert resp.records_total == 57
        assert resp.records_filtered == 57
        assert resp.data == ROWS
        assert resp.data[0] is ROWS[0]

    def test_filtered_count(self, orgs_default):
        results = {
            "recordsTotal": [(57,)],
            "recordsFiltered": [(2,)],
            "select": ROWS,
        }
        resp = ResponseMapper(orgs_default).map(_compiled(), results)
        assert resp.records_total == 57
        assert resp.records_filtered == 2

    @pytest.mark.parametrize("results", [None, {}, {"select": ROWS}, "rows", [ROWS, ROWS]])
    def test_too_few_results_give_zeroed_response(self, orgs_default, results):
        resp = ResponseMapper(orgs_default).map(_compiled(draw=9), results)
        assert resp.to_dict() == {
            "draw": 9,
            "recordsTotal": 0,
            "recordsFiltered": 0,
            "data": [],
        }

    def test_missing_select_gives_empty_data(self, orgs_default):
        results = {"changeDatabaseOrSchema": [], "recordsTotal": [(5,)]}
        resp = ResponseMapper(orgs_default).map(_compiled(), results)
        assert resp.records_total == 5
        assert resp.data == []

    def test_row_formatter(self):
        def to_pair(row, config):
            assert config.table_name == "Orgs"
            return [row["o"], row["cn"]]

        config = TableConfig(table_name="Orgs", row_formatter=to_pair)
        results = {"recordsTotal": [(2,)], "select": ROWS}
        resp = ResponseMapper(config).map(_compiled(), results)
        assert resp.data == [["acme", "Acme Inc"], ["init", "Initech"]]

    def test_compile_error_is_reported(self, orgs_default):
        compiled = StatementBuilder(orgs_default).build("not a mapping")
        resp = ResponseMapper(orgs_default).map(compiled, {})
        body = resp.to_dict()
        assert body["draw"] == 0
        assert body["error"] == compiled.error


def test_to_dict_uses_ui_keys(orgs_default):
    results = {"recordsTotal": [(57,)], "recordsFiltered": [(1,)], "select": ROWS[:1]}
    resp = ResponseMapper(orgs_default).map(_compiled(), results)
    assert resp.to_dict() == {
        "draw": 3,
        "recordsTotal": 57,
        "recordsFiltered": 1,
        "data": ROWS[:1],
    }


def test_preview_truncates_rows(orgs_default):
    results = {"recordsTotal": [(57,)], "select": ROWS}
    resp = ResponseMapper(orgs_default).map(_compiled(), results)
    preview = resp.preview(1)
    assert preview["data"] == ROWS[:1]
    assert preview["dataLength"] == 2
    assert resp.preview()["data"] == ROWS
    assert len(resp.data) == 2


def test_full_round_trip(orgs_default):
    compiled = pagesql.build_statements(orgs_default, orgs_request(draw="4", search="acme"))
    results = {
        "recordsTotal": [{"COUNT(id)": 57}],
        "recordsFiltered": [{"COUNT(id)": 1}],
        "select": ROWS[:1],
    }
    assert set(results) == set(compiled.statements)
    body = pagesql.map_response(orgs_default, compiled, results).to_dict()
    assert body == {"draw": 4, "recordsTotal": 57, "recordsFiltered": 1, "data": ROWS[:1]}


def test_row_formatter_reads_configured_params():
    def label(row, config):
        params = config.row_formatter_params
        return f"{params['prefix']}{row['o']}"

    config = TableConfig(
        table_name="Orgs",
        row_formatter=label,
        row_formatter_params={"prefix": "org:"},
    )
    results = {"recordsTotal": [(2,)], "select": ROWS}
    resp = ResponseMapper(config).map(_compiled(), results)
    assert resp.data == ["org:acme", "org:init"]


def test_cursor_results_are_read(orgs_default):
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE Orgs (id INTEGER, o TEXT)")
    conn.executemany("INSERT INTO Orgs VALUES (?, ?)", [(1, "alpha"), (2, "beta"), (3, "gamma")])
    results = {
        "recordsTotal": conn.execute("SELECT COUNT(id) FROM Orgs"),
        "select": conn.execute("SELECT * FROM Orgs ORDER BY id LIMIT 2"),
    }
    resp = ResponseMapper(orgs_default).map(_compiled(), results)
    conn.close()
    assert resp.records_total == 3
    assert resp.data == [(1, "alpha"), (2, "beta")]


def test_generator_rows_are_read(orgs_default):
    results = {"recordsTotal": iter([(2,)]), "select": (row for row in ROWS)}
    resp = ResponseMapper(orgs_default).map(_compiled(), results)
    assert resp.records_total == 2
    assert resp.data == ROWS
