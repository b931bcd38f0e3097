"""Pydantic models for the per-request parameters sent by the table UI.

The UI sends every value as a string (``"true"``, ``"10"``), and clients
are not trusted to send well-formed payloads.  All models therefore coerce
leniently: anything that cannot be understood becomes "absent" instead of
failing validation, and the statement builder decides what to skip.

Shape::

    {
        "draw": "3", "start": "0", "length": "10",
        "search": {"value": "smith"},
        "columns": [{"name": "last_name", "searchable": "true",
                     "orderable": "true", "search": {"value": ""}}],
        "order": [{"column": "0", "dir": "asc"}],
    }
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def to_int(value: Any, default: int | None = None) -> int | None:
    """Coerce an int or numeric string to ``int``; ``default`` otherwise."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        try:
            return int(value) if value == int(value) else default
        except (ValueError, OverflowError):
            return default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def to_bool(value: Any) -> bool:
    """``True`` only for ``True`` or the string ``"true"`` (any case)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _to_search(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, str):
        return {"value": value}
    return {}


def _to_entries(value: Any) -> list[dict[str, Any]]:
    # Non-mapping entries become empty placeholders so that indices used by
    # ``order[].column`` still line up with ``columns``.
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return []
    return [dict(item) if isinstance(item, Mapping) else {} for item in value]


class SearchValue(BaseModel):
    """A ``{"value": ...}`` search term.

    ``value`` is kept as sent; the sanitizer rejects non-strings.
    """

    model_config = ConfigDict(extra="ignore")

    value: Any = None


class ColumnRequest(BaseModel):
    """One entry of the request's ``columns`` list.

    Attributes:
        name: SQL column name.
        data: The UI's data property; used as the name when ``name`` is
            empty and ``data`` is not a numeric index.
        searchable: Column takes part in searching.
        orderable: Column may be sorted on.
        search: Per-column search term.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    data: Any = None
    searchable: bool = False
    orderable: bool = False
    search: SearchValue = Field(default_factory=SearchValue)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("searchable", "orderable", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return to_bool(value)

    @field_validator("search", mode="before")
    @classmethod
    def _coerce_search(cls, value: Any) -> dict[str, Any]:
        return _to_search(value)

    @property
    def column_name(self) -> str | None:
        """The resolvable column name, or ``None``."""
        if self.name:
            return self.name
        if isinstance(self.data, str) and self.data and not self.data.isdigit():
            return self.data
        return None


class OrderRequest(BaseModel):
    """One entry of the request's ``order`` list.

    Attributes:
        column: Index into the request's ``columns`` list.
        direction: Sort direction as sent (``"asc"`` / ``"desc"``).
    """

    model_config = ConfigDict(extra="ignore")

    column: int | None = None
    direction: str = Field(default="asc", validation_alias=AliasChoices("dir", "direction"))

    @field_validator("column", mode="before")
    @classmethod
    def _coerce_column(cls, value: Any) -> int | None:
        return to_int(value)

    @field_validator("direction", mode="before")
    @classmethod
    def _coerce_direction(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class DataTableRequest(BaseModel):
    """All parameters of one server-side processing request.

    Attributes:
        draw: Echo token, 0 when absent or not numeric.
        start: Row offset; ``None`` (or negative) means "no paging".
        length: Page length; ``None`` or non-positive means "default".
        search: Global search term.
        columns: Column descriptors, in display order.
        order: Sort instructions, primary first.
    """

    model_config = ConfigDict(extra="ignore")

    draw: int = 0
    start: int | None = None
    length: int | None = None
    search: SearchValue = Field(default_factory=SearchValue)
    columns: list[ColumnRequest] = Field(default_factory=list)
    order: list[OrderRequest] = Field(default_factory=list)

    @field_validator("draw", mode="before")
    @classmethod
    def _coerce_draw(cls, value: Any) -> int:
        return to_int(value, 0)  # type: ignore[return-value]

    @field_validator("start", "length", mode="before")
    @classmethod
    def _coerce_paging(cls, value: Any) -> int | None:
        return to_int(value)

    @field_validator("search", mode="before")
    @classmethod
    def _coerce_search(cls, value: Any) -> dict[str, Any]:
        return _to_search(value)

    @field_validator("columns", "order", mode="before")
    @classmethod
    def _coerce_entries(cls, value: Any) -> list[dict[str, Any]]:
        return _to_entries(value)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, raw: Any) -> DataTableRequest | None:
        """Build a request from decoded parameters.

        Returns:
            The request, or ``None`` when ``raw`` is not a mapping.
        """
        if isinstance(raw, DataTableRequest):
            return raw
        if not isinstance(raw, Mapping):
            return None
        return cls.model_validate(dict(raw))

    @classmethod
    def from_legacy(
        cls,
        params: Mapping[str, Any],
        column_names: Sequence[str] | None = None,
    ) -> DataTableRequest:
        """Convert legacy (DataTables 1.9) flat parameters.

        The legacy protocol sends ``sEcho``, ``iDisplayStart``,
        ``iDisplayLength``, ``sSearch`` and per-column ``sSearch_N``,
        ``bSearchable_N``, ``bSortable_N``, ``mDataProp_N`` keys, plus
        ``iSortingCols`` pairs of ``iSortCol_N`` / ``sSortDir_N``.

        Args:
            params: The flat legacy parameters.
            column_names: SQL names of the columns in display order.  When
                omitted, non-numeric ``mDataProp_N`` values are used.

        Returns:
            The equivalent :class:`DataTableRequest`.
        """
        count = to_int(params.get("iColumns"))
        if count is None:
            count = _legacy_column_count(params)
        if column_names is not None:
            count = max(count, len(column_names))

        columns = []
        for idx in range(count):
            name = column_names[idx] if column_names and idx < len(column_names) else None
            columns.append(
                {
                    "name": name,
                    "data": params.get(f"mDataProp_{idx}"),
                    "searchable": params.get(f"bSearchable_{idx}"),
                    "orderable": params.get(f"bSortable_{idx}"),
                    "search": {"value": params.get(f"sSearch_{idx}")},
                }
            )

        order = [
            {
                "column": params.get(f"iSortCol_{idx}"),
                "dir": params.get(f"sSortDir_{idx}", "asc"),
            }
            for idx in range(to_int(params.get("iSortingCols"), 0) or 0)
        ]

        return cls.model_validate(
            {
                "draw": params.get("sEcho"),
                "start": params.get("iDisplayStart"),
                "length": params.get("iDisplayLength"),
                "search": {"value": params.get("sSearch")},
                "columns": columns,
                "order": order,
            }
        )


_LEGACY_COLUMN_KEY = re.compile(r"^(?:bSearchable|bSortable|sSearch|mDataProp)_(\d+)$")


def _legacy_column_count(params: Mapping[str, Any]) -> int:
    indices = [
        int(match.group(1))
        for key in params
        if isinstance(key, str) and (match := _LEGACY_COLUMN_KEY.match(key))
    ]
    return max(indices) + 1 if indices else 0
