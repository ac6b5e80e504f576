"""Conversion of SQL schemas into table data for proto generation."""

from __future__ import annotations

import os
from typing import Callable, Iterable

from .ddl import DDLParseError, TableDef, parse_create_tables
from .mux import TEXT_DIALECT
from .typemap import mysql_field_type, postgres_field_type
from .types import ConvertOptions, FieldData, TableData

FieldTypeFunc = Callable[[str], str]


class ConvertError(Exception):
    """Raised when a schema cannot be converted."""


def convert_table(field_type: FieldTypeFunc, table: TableDef) -> TableData:
    """Turn one parsed table into table data, mapping column types with ``field_type``."""
    return TableData(
        name=table.name,
        comment=table.comment,
        charset=table.charset,
        collation=table.collation,
        fields=[
            FieldData(
                name=column.name,
                type=field_type(column.type) or "string",
                # primary key columns are never nullable
                null=column.nullable and not column.primary_key,
                comment=column.comment,
            )
            for column in table.columns
        ],
    )


def schema_tables(field_type: FieldTypeFunc, tables: Iterable[TableDef]) -> list[TableData]:
    """Convert every table in ``tables``."""
    return [convert_table(field_type, table) for table in tables]


class TextConverter:
    """Converter for SQL DDL text, given inline or as a file path."""

    def __init__(self, options: ConvertOptions) -> None:
        self.options = options

    def load_sql(self) -> str:
        """Return the SQL text: the file's content if the schema path is a file, else the path itself."""
        path = self.options.schema_path
        if not os.path.isfile(path):
            return path
        try:
            with open(path, encoding="utf-8") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError):
            return ""

    def field_type(self, sql_type: str) -> str:
        """Map a column type, trying MySQL names before PostgreSQL ones."""
        return mysql_field_type(sql_type) or postgres_field_type(sql_type)

    def schema_tables(self) -> list[TableData]:
        """Parse the SQL, filter the tables and convert them."""
        sql = self.load_sql()
        if not sql:
            raise ConvertError(f"cannot load SQL file: {self.options.schema_path}")
        try:
            tables = parse_create_tables(sql)
        except DDLParseError as exc:
            raise ConvertError(f"parse failed: {exc}") from exc
        if not tables:
            raise ConvertError("invalid SQL: no valid table could be parsed")

        included = set(self.options.included_tables or ())
        if included:
            tables = [table for table in tables if table.name in included]
        excluded = set(self.options.excluded_tables or ())
        if excluded:
            tables = [table for table in tables if table.name not in excluded]

        return schema_tables(self.field_type, tables)


def new_convert(options: ConvertOptions) -> TextConverter:
    """Create the converter that suits the dialect of ``options.driver``."""
    if options.driver is None:
        raise ConvertError("no driver given")
    dialect = options.driver.dialect
    if dialect == TEXT_DIALECT:
        return TextConverter(options)
    raise ConvertError(f'unsupported dialect "{dialect}"')