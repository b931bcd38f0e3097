"""Print the statements compiled for the Orgs sample table.

Walks one request through four variations (no search, a search term, a
different sort column, a later page) and prints the statement map each
time.

Usage::

    python examples/generate.py
    python examples/generate.py --dialect oracle --database crm
"""
from __future__ import annotations

import argparse
import logging

import pagesql
from pagesql import TableConfig

ORGS_COLUMNS = ["o", "cn", "support", "email"]


def _request() -> dict:
    return {
        "draw": "1",
        "start": "0",
        "length": "4",
        "search": {"value": "", "regex": "false"},
        "columns": [
            {"name": name, "searchable": "true", "orderable": "true", "search": {"value": ""}}
            for name in ORGS_COLUMNS
        ],
        "order": [{"column": "0", "dir": "asc"}],
    }


def generate(config: TableConfig, params: dict) -> None:
    compiled = pagesql.build_statements(config, params)
    print("Queries:")
    for key, sql in compiled.statements.items():
        print(f"  {key:<24} {sql}")
    for skipped in compiled.skipped:
        print(f"  (skipped {skipped.field}: {skipped.reason})")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--dialect",
        default="default",
        choices=pagesql.DialectFactory.registered_dialects(),
    )
    parser.add_argument("--database", default=None, help="database/schema to switch to")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = TableConfig(table_name="Orgs", dialect=args.dialect, database=args.database)
    params = _request()

    generate(config, params)
    params["search"]["value"] = "hello"
    generate(config, params)
    params["order"] = [{"column": "2", "dir": "desc"}]
    generate(config, params)
    params["start"], params["length"] = "30", "15"
    generate(config, params)


if __name__ == "__main__":
    main()
