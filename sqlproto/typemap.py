"""Mapping of SQL column types to protobuf scalar types."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def _invert(groups: Mapping[str, str]) -> Mapping[str, str]:
    """Build a read-only SQL-type -> proto-type table from comma-separated groups."""
    table: dict[str, str] = {}
    for proto_type, sql_types in groups.items():
        for sql_type in sql_types.split(","):
            table[sql_type.strip()] = proto_type
    return MappingProxyType(table)


# Protobuf has no decimal, date/time or enum scalar, so those become strings.
MYSQL_TYPE_MAPPING = _invert(
    {
        "int32": "TINYINT, SMALLINT, MEDIUMINT, INT, INTEGER, YEAR",
        "int64": "BIGINT",
        "uint64": "UNSIGNED BIG INT",
        "uint32": "INT UNSIGNED",
        "float": "FLOAT",
        "double": "DOUBLE",
        "string": (
            "DECIMAL, CHAR, VARCHAR, TINYTEXT, TEXT, MEDIUMTEXT, LONGTEXT, "
            "DATE, TIME, DATETIME, TIMESTAMP, ENUM, SET"
        ),
        "bytes": "BINARY, VARBINARY, TINYBLOB, BLOB, MEDIUMBLOB, LONGBLOB",
        "bool": "BOOLEAN, BOOL",
    }
)

POSTGRESQL_TYPE_MAPPING = _invert(
    {
        "int32": "SMALLINT, INT2, INTEGER, INT, INT4, SERIAL, SERIAL4",
        "int64": "BIGINT, INT8, BIGSERIAL, SERIAL8",
        "float": "REAL, FLOAT4",
        "double": "DOUBLE PRECISION, FLOAT8",
        "string": (
            "NUMERIC, CHAR, CHARACTER, VARCHAR, CHARACTER VARYING, TEXT, BPCHAR, "
            "DATE, TIME, TIMESTAMP, TIMESTAMPTZ, INTERVAL, "
            "CIDR, INET, MACADDR, JSON, JSONB, UUID"
        ),
        "bytes": "BYTEA",
        "bool": "BOOLEAN, BOOL",
    }
)


def _base_type(sql_type: str) -> str:
    """Upper-case the type and drop any parenthesised part, e.g. VARCHAR(255)."""
    return sql_type.upper().split("(", 1)[0].strip()


def mysql_field_type(sql_type: str) -> str:
    """Protobuf type for a MySQL column type, or "" when unknown."""
    return MYSQL_TYPE_MAPPING.get(_base_type(sql_type), "")


def postgres_field_type(sql_type: str) -> str:
    """Protobuf type for a PostgreSQL column type, or "" when unknown."""
    return POSTGRESQL_TYPE_MAPPING.get(_base_type(sql_type), "")