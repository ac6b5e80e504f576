"""Data records shared by the schema converters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .mux import ConvertDriver


@dataclass
class FieldData:
    """One column of a table, reduced to what a proto message needs."""

    name: str
    type: str
    null: bool = False
    comment: str = ""


@dataclass
class TableData:
    """One table with its attributes and columns."""

    name: str
    comment: str = ""
    charset: str = ""
    collation: str = ""
    fields: list[FieldData] = field(default_factory=list)

    def with_comment(self) -> bool:
        """Return True when the table carries a comment."""
        return self.comment != ""


@dataclass
class ConvertOptions:
    """Settings handed to every schema converter."""

    included_tables: list[str] = field(default_factory=list)
    excluded_tables: list[str] = field(default_factory=list)
    proto_path: str = ""
    schema_path: str = ""
    source_module_name: str = ""
    module_name: str = ""
    module_version: str = ""
    service_type: str = ""
    driver: Optional[ConvertDriver] = None


@dataclass
class Options:
    """User-facing settings of a conversion run."""

    driver: str = ""
    source: str = ""
    included_tables: list[str] = field(default_factory=list)
    excluded_tables: list[str] = field(default_factory=list)
    output_path: str = ""
    source_module: str = ""
    module: str = ""
    version: str = ""
    service: str = ""