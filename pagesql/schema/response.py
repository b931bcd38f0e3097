"""Pydantic model for the server-side processing response sent to the UI."""
from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field


class DataTableResponse(BaseModel):
    """The ``{draw, recordsTotal, recordsFiltered, data}`` envelope.

    Attributes:
        draw: Echo of the request's draw token.
        records_total: Row count before searching.
        records_filtered: Row count after searching.
        data: Rows of the current page, as returned by the database (or by
            the configured row formatter).
        error: Message for the UI when the request could not be served.
    """

    draw: int = 0
    records_total: int = Field(
        default=0,
        validation_alias=AliasChoices("records_total", "recordsTotal"),
        serialization_alias="recordsTotal",
    )
    records_filtered: int = Field(
        default=0,
        validation_alias=AliasChoices("records_filtered", "recordsFiltered"),
        serialization_alias="recordsFiltered",
    )
    data: list[Any] = Field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise with the UI's camelCase keys; ``error`` only when set."""
        payload = self.model_dump(by_alias=True)
        if payload.get("error") is None:
            payload.pop("error", None)
        return payload

    def preview(self, count: int | None = None) -> dict[str, Any]:
        """Reduced-size copy for logging and debugging.

        Args:
            count: Maximum number of rows to keep; all rows when ``None``.

        Returns:
            :meth:`to_dict` output with ``data`` truncated and the full row
            count in ``dataLength``.
        """
        payload = self.to_dict()
        total = len(self.data)
        keep = total if count is None else min(count, total)
        payload["data"] = list(self.data[:keep])
        payload["dataLength"] = total
        return payload
