"""Entry point that turns a DSN into converted table data."""

from __future__ import annotations

import os
from typing import Iterable, Optional

from .convert import new_convert
from .mux import DEFAULT, Mux
from .types import ConvertOptions, TableData


def normalize_dsn(dsn: str) -> str:
    """Give ``dsn`` a scheme: kept if present, ``file://`` for a path, else ``text://``."""
    if "://" in dsn:
        return dsn
    if os.path.exists(dsn):
        return "file://" + dsn
    return "text://" + dsn


def convert(
    dsn: str,
    include_tables: Optional[Iterable[str]] = None,
    exclude_tables: Optional[Iterable[str]] = None,
    mux: Optional[Mux] = None,
) -> list[TableData]:
    """Read the schema that ``dsn`` points at and convert its tables."""
    registry = DEFAULT if mux is None else mux
    driver = registry.open_convert(normalize_dsn(dsn))
    options = ConvertOptions(
        included_tables=list(include_tables or ()),
        excluded_tables=list(exclude_tables or ()),
        schema_path=driver.schema_name,
        driver=driver,
    )
    return new_convert(options).schema_tables()