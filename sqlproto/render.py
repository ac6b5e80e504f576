"""Building service template data from converted tables."""

from __future__ import annotations

import re
from typing import Iterable, Union

from .naming import singular
from .templates import GrpcProtoTemplateData, ProtoField, RestProtoTemplateData
from .types import TableData

ServiceData = Union[GrpcProtoTemplateData, RestProtoTemplateData]

_COMMENT_SUFFIX = re.compile(r"(表|table)\Z")


def remove_table_comment_suffix(text: str) -> str:
    """Drop a trailing "表" or "table" from a table comment."""
    return _COMMENT_SUFFIX.sub("", text)


def proto_fields(table: TableData) -> list[ProtoField]:
    """Proto fields for the columns of ``table``, numbered from 1."""
    return [
        ProtoField(number=number, name=f.name, type=f.type, comment=f.comment)
        for number, f in enumerate(table.fields, start=1)
    ]


def build_service_data(
    service_type: str,
    target_module: str,
    source_module: str,
    version: str,
    table: TableData,
) -> ServiceData:
    """Template data of one table for a "grpc" or "rest" service."""
    kind = service_type.strip().lower()
    name = singular(table.name)
    comment = remove_table_comment_suffix(table.comment)
    if kind == "grpc":
        return GrpcProtoTemplateData(
            name=name,
            module=target_module,
            version=version,
            comment=comment,
            fields=proto_fields(table),
        )
    if kind == "rest":
        return RestProtoTemplateData(
            name=name,
            source_module=source_module,
            target_module=target_module,
            version=version,
            comment=comment,
        )
    raise ValueError(f"unsupported service type: {service_type}")


def build_services_data(
    service_type: str,
    target_module: str,
    source_module: str,
    version: str,
    tables: Iterable[TableData],
) -> list[ServiceData]:
    """Template data for every table in ``tables``."""
    return [
        build_service_data(service_type, target_module, source_module, version, table)
        for table in tables
    ]