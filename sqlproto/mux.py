"""Selection of a schema source by the scheme of its DSN."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

TEXT_DIALECT = "text"


@dataclass(frozen=True)
class ConvertDriver:
    """Where a schema comes from and in which dialect it is written."""

    dialect: str
    schema_name: str


Provider = Callable[[str], ConvertDriver]


def parse_dsn(url: str) -> tuple[str, str]:
    """Split a DSN into its scheme and the part after ``://``."""
    scheme, sep, rest = url.partition("://")
    if not sep:
        raise ValueError(f'failed to parse dsn: "{url}"')
    return scheme, rest


def text_provider(dsn: str) -> ConvertDriver:
    """Driver for SQL text held in the DSN itself or in a file it names."""
    return ConvertDriver(dialect=TEXT_DIALECT, schema_name=dsn)


class Mux:
    """Registry of providers keyed by DSN scheme."""

    def __init__(self) -> None:
        self.providers: dict[str, Provider] = {}

    def register_provider(self, provider: Provider, *args: str) -> None:
        """Register ``provider`` for every scheme given."""
        for scheme in args:
            self.providers[scheme] = provider

    def open_convert(self, dsn: str) -> ConvertDriver:
        """Open a driver for ``dsn`` through the provider of its scheme."""
        try:
            scheme, rest = parse_dsn(dsn)
        except ValueError as exc:
            raise ValueError(f"failed to parse DSN: {exc}") from exc
        try:
            provider = self.providers[scheme]
        except KeyError:
            raise ValueError(f'provider does not exist: "{scheme}"') from None
        return provider(rest)


DEFAULT = Mux()
DEFAULT.register_provider(text_provider, "text", "file")