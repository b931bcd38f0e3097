"""Shared pytest fixtures for pageSQL unit tests."""
from __future__ import annotations

import pytest

from pagesql.schema.table import TableConfig


@pytest.fixture(scope="session")
def orgs_default() -> TableConfig:
    """The Orgs table, default (MySQL-like) dialect."""
    return TableConfig(table_name="Orgs")


@pytest.fixture(scope="session")
def orgs_postgres() -> TableConfig:
    return TableConfig(table_name="Orgs", dialect="postgres")


@pytest.fixture(scope="session")
def orgs_oracle() -> TableConfig:
    return TableConfig(table_name="Orgs", dialect="oracle")
