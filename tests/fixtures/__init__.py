"""Test fixtures: the ``Orgs`` sample table and request builders."""

from __future__ import annotations

from typing import Any

ORGS_COLUMNS = ["o", "cn", "support", "email"]

#: A legacy (DataTables 1.9) query string for the Orgs table.
LEGACY_ORGS_PARAMS: dict[str, str] = {
    "sEcho": "1",
    "iColumns": "4",
    "iDisplayStart": "0",
    "iDisplayLength": "4",
    "mDataProp_0": "0",
    "mDataProp_1": "1",
    "mDataProp_2": "2",
    "mDataProp_3": "3",
    "sSearch": "",
    "bRegex": "false",
    "sSearch_0": "",
    "bSearchable_0": "true",
    "sSearch_1": "",
    "bSearchable_1": "true",
    "sSearch_2": "",
    "bSearchable_2": "true",
    "sSearch_3": "",
    "bSearchable_3": "true",
    "iSortCol_0": "0",
    "sSortDir_0": "asc",
    "iSortingCols": "1",
    "bSortable_0": "true",
    "bSortable_1": "true",
    "bSortable_2": "true",
    "bSortable_3": "true",
    "_": "1349495139702",
}


def column(
    name: str,
    searchable: str = "true",
    orderable: str = "true",
    search: str = "",
) -> dict[str, Any]:
    """One request column descriptor, with string flags as the UI sends them."""
    return {
        "data": name,
        "name": name,
        "searchable": searchable,
        "orderable": orderable,
        "search": {"value": search, "regex": "false"},
    }


def orgs_request(
    start: Any = "0",
    length: Any = "4",
    search: str = "",
    order: list[dict[str, Any]] | None = None,
    draw: Any = "1",
    columns: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """A modern request for the Orgs table; every column searchable and orderable."""
    params: dict[str, Any] = {
        "draw": draw,
        "search": {"value": search, "regex": "false"},
        "columns": columns if columns is not None else [column(c) for c in ORGS_COLUMNS],
        "order": order or [],
    }
    if start is not None:
        params["start"] = start
    if length is not None:
        params["length"] = length
    return params
