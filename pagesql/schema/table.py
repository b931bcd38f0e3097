"""Pydantic model for the TableConfig: the description of one table or view.

A ``TableConfig`` is created once per table and reused for every request.
It is immutable; per-request state lives in
:class:`~pagesql.schema.statements.RequestContext`, which the compiler
returns and the response mapper consumes.

Options may be given by their Python names or by the option names of the
original node-datatable builder, so existing definitions port as-is::

    TableConfig(table_name="Orgs", search_columns=["o", "cn"])
    TableConfig.model_validate({"sTableName": "Orgs", "aSearchColumns": ["o", "cn"]})
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from pagesql.compile.registry import DialectFactory
from pagesql.compile.sanitize import DEFAULT_MAX_LENGTH
from pagesql.errors import ConfigError

#: Page length used when the request does not supply a positive one.
DEFAULT_PAGE_LENGTH = 100

#: Called as ``row_formatter(row, config)``; returns the formatted row.
RowFormatter = Callable[..., Any]


def _alias(name: str, legacy: str) -> AliasChoices:
    return AliasChoices(name, legacy)


class TableConfig(BaseModel):
    """Immutable configuration of a paginated table.

    Attributes:
        table_name: Table or view queried when ``from_sql`` is not set.
        count_column: Column counted by ``COUNT(...)`` (ignored when
            ``select_sql`` is set, which counts ``*``).
        database: Database/schema made active before querying.
        search_columns: Columns matched by the global search.  When unset,
            the request's searchable columns are used.
        select_sql: Raw select-list replacing ``*``.
        from_sql: Raw FROM fragment replacing ``table_name``.
        where_and_sql: Raw condition AND-ed into every WHERE clause.
        date_column: Column filtered by ``date_from`` / ``date_to``.
        date_from: Inclusive lower bound for ``date_column``.
        date_to: Inclusive upper bound for ``date_column``.
        dialect: Registered dialect name.
        default_length: Page length fallback.
        max_search_length: Longest accepted search value.
        order_columns: Request column name to ORDER BY expression overrides.
        row_formatter: Optional transform applied to each result row.
        row_formatter_params: Free-form options for ``row_formatter``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    table_name: str | None = Field(
        default=None, validation_alias=_alias("table_name", "sTableName")
    )
    count_column: str = Field(
        default="id", validation_alias=_alias("count_column", "sCountColumnName")
    )
    database: str | None = Field(
        default=None, validation_alias=_alias("database", "sDatabase")
    )
    search_columns: tuple[str, ...] | None = Field(
        default=None, validation_alias=_alias("search_columns", "aSearchColumns")
    )
    select_sql: str | None = Field(
        default=None, validation_alias=_alias("select_sql", "sSelectSql")
    )
    from_sql: str | None = Field(
        default=None, validation_alias=_alias("from_sql", "sFromSql")
    )
    where_and_sql: str | None = Field(
        default=None, validation_alias=_alias("where_and_sql", "sWhereAndSql")
    )
    date_column: str | None = Field(
        default=None, validation_alias=_alias("date_column", "sDateColumnName")
    )
    date_from: datetime | None = Field(
        default=None, validation_alias=_alias("date_from", "dateFrom")
    )
    date_to: datetime | None = Field(
        default=None, validation_alias=_alias("date_to", "dateTo")
    )
    dialect: str = "default"
    default_length: int = Field(default=DEFAULT_PAGE_LENGTH, gt=0)
    max_search_length: int = Field(default=DEFAULT_MAX_LENGTH, gt=0)
    order_columns: dict[str, str] = Field(default_factory=dict)
    row_formatter: RowFormatter | None = Field(
        default=None, validation_alias=_alias("row_formatter", "fnRowFormatter")
    )
    row_formatter_params: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=_alias("row_formatter_params", "oRowFormatterParams"),
    )

    @model_validator(mode="after")
    def _check_consistency(self) -> TableConfig:
        if not self.table_name and not self.from_sql:
            raise ConfigError(
                "Either table_name or from_sql must be set.", field="table_name"
            )
        if not DialectFactory.is_registered(self.dialect):
            raise ConfigError(
                f"Unknown dialect '{self.dialect}'. Registered dialects: "
                f"{DialectFactory.registered_dialects()}.",
                field="dialect",
            )
        if (self.date_from or self.date_to) and not self.date_column:
            raise ConfigError(
                "date_from/date_to require date_column.", field="date_column"
            )
        if self.date_from and self.date_to and _utc(self.date_from) > _utc(self.date_to):
            raise ConfigError("date_from is after date_to.", field="date_from")
        return self

    @property
    def source(self) -> str:
        """The FROM target: ``from_sql`` when set, else ``table_name``."""
        return self.from_sql or self.table_name  # type: ignore[return-value]

    @property
    def select_list(self) -> str:
        return self.select_sql or "*"

    @property
    def count_target(self) -> str:
        """``*`` when a raw select-list is configured, else ``count_column``."""
        return "*" if self.select_sql else self.count_column

    @property
    def has_date_range(self) -> bool:
        return bool(self.date_column and (self.date_from or self.date_to))


def _utc(value: datetime) -> datetime:
    """Normalise to an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iso_timestamp(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    utc = _utc(value)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
