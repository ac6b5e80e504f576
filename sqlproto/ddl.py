"""A small parser for SQL CREATE TABLE statements."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .typemap import MYSQL_TYPE_MAPPING, POSTGRESQL_TYPE_MAPPING


class DDLParseError(ValueError):
    """Raised when a CREATE TABLE statement cannot be parsed."""


@dataclass
class ColumnDef:
    """One column as written in a CREATE TABLE statement."""

    name: str
    type: str
    nullable: bool = True
    primary_key: bool = False
    comment: str = ""
    default: str = ""


@dataclass
class TableDef:
    """One table as written in a CREATE TABLE statement."""

    name: str
    comment: str = ""
    charset: str = ""
    collation: str = ""
    columns: list[ColumnDef] = field(default_factory=list)
    indexes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class _Token:
    kind: str  # "word", "ident", "string" or "paren"
    text: str


_QUOTES = "'\"`"

_CREATE_RE = re.compile(
    r"\bCREATE\s+(?:OR\s+REPLACE\s+)?(?:(?:GLOBAL|LOCAL)\s+)?"
    r"(?:TEMP(?:ORARY)?\s+|UNLOGGED\s+)?TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?",
    re.IGNORECASE,
)
_NAME_RE = re.compile(r"[\w$]+")
_WORD_RE = re.compile(r"[^\s(),'\"`]+")

_COMMENT_OPTION = re.compile(r"\bCOMMENT\s*=?\s*'((?:[^'\\]|\\.|'')*)'", re.IGNORECASE | re.DOTALL)
_CHARSET_OPTION = re.compile(r"\b(?:CHARSET|CHARACTER\s+SET)\s*=?\s*(\w+)", re.IGNORECASE)
_COLLATE_OPTION = re.compile(r"\bCOLLATE\s*=?\s*(\w+)", re.IGNORECASE)

_TYPE_NAMES = frozenset(
    name.split()[0] for name in (*MYSQL_TYPE_MAPPING, *POSTGRESQL_TYPE_MAPPING)
)

_TYPE_STOP_WORDS = frozenset(
    {
        "NOT",
        "NULL",
        "DEFAULT",
        "PRIMARY",
        "KEY",
        "UNIQUE",
        "COMMENT",
        "AUTO_INCREMENT",
        "AUTOINCREMENT",
        "REFERENCES",
        "CHECK",
        "CONSTRAINT",
        "COLLATE",
        "CHARSET",
        "GENERATED",
        "ON",
        "AS",
        "IDENTITY",
    }
)

_CONSTRAINT_HEADS = frozenset(
    {"PRIMARY", "FOREIGN", "UNIQUE", "CHECK", "EXCLUDE", "KEY", "INDEX"}
)


def _skip_quoted(text: str, start: int) -> int:
    """Return the offset just past the quoted text that starts at ``start``."""
    quote = text[start]
    i, n = start + 1, len(text)
    while i < n:
        ch = text[i]
        if ch == "\\" and quote == "'":
            i += 2
            continue
        if ch == quote:
            if i + 1 < n and text[i + 1] == quote:
                i += 2
                continue
            return i + 1
        i += 1
    raise DDLParseError(f"unterminated quoted text at offset {start}")


def _unquote(raw: str) -> str:
    quote, inner = raw[0], raw[1:-1]
    if quote == "'":
        inner = re.sub(r"\\(.)", r"\1", inner, flags=re.DOTALL)
    return inner.replace(quote * 2, quote)


def _closing_paren(text: str, start: int) -> int:
    """Return the offset of the parenthesis closing the one at ``start``."""
    depth = 0
    i = start
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_quoted(text, i)
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise DDLParseError("unbalanced parentheses")


def _statements(sql: str) -> Iterator[str]:
    """Split SQL text into statements, dropping comments."""
    buf: list[str] = []
    depth = 0
    i, n = 0, len(sql)
    while i < n:
        ch = sql[i]
        if ch in _QUOTES:
            end = _skip_quoted(sql, i)
            buf.append(sql[i:end])
            i = end
            continue
        if sql.startswith("--", i) or ch == "#":
            end = sql.find("\n", i)
            i = n if end < 0 else end
            continue
        if sql.startswith("/*", i):
            end = sql.find("*/", i + 2)
            if end < 0:
                raise DDLParseError("unterminated block comment")
            buf.append(" ")
            i = end + 2
            continue
        if ch == ";" and depth == 0:
            yield "".join(buf)
            buf = []
            i += 1
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        buf.append(ch)
        i += 1
    yield "".join(buf)


def _split_top_level(body: str) -> list[str]:
    """Split on commas that are outside parentheses and quotes."""
    items = []
    depth = 0
    start = 0
    i = 0
    while i < len(body):
        ch = body[i]
        if ch in _QUOTES:
            i = _skip_quoted(body, i)
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            items.append(body[start:i])
            start = i + 1
        i += 1
    items.append(body[start:])
    return items


def _tokenize(text: str) -> Iterator[_Token]:
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch.isspace() or ch == ",":
            i += 1
            continue
        if ch in _QUOTES:
            end = _skip_quoted(text, i)
            yield _Token("string" if ch == "'" else "ident", _unquote(text[i:end]))
            i = end
            continue
        if ch == "(":
            end = _closing_paren(text, i) + 1
            yield _Token("paren", text[i:end])
            i = end
            continue
        if ch == ")":
            raise DDLParseError("unbalanced parentheses")
        match = _WORD_RE.match(text, i)
        yield _Token("word", match.group())
        i = match.end()


def _upper(tokens: list[_Token], i: int) -> str:
    if i < len(tokens) and tokens[i].kind == "word":
        return tokens[i].text.upper()
    return ""


def _column_list(tokens: list[_Token]) -> list[str]:
    paren = next((tok for tok in tokens if tok.kind == "paren"), None)
    if paren is None:
        return []
    names = []
    for part in _split_top_level(paren.text[1:-1]):
        part_tokens = list(_tokenize(part))
        if part_tokens:
            names.append(part_tokens[0].text)
    return names


def _index_name(tokens: list[_Token]) -> str:
    for tok in tokens[1:]:
        if tok.kind == "paren":
            break
        if tok.kind == "word" and tok.text.upper() in ("KEY", "INDEX"):
            continue
        if tok.kind in ("word", "ident"):
            return tok.text
    return ""


def _looks_like_column(tokens: list[_Token]) -> bool:
    return len(tokens) > 1 and _upper(tokens, 1) in _TYPE_NAMES


def _stops_type(tokens: list[_Token], i: int) -> bool:
    word = _upper(tokens, i)
    if word in _TYPE_STOP_WORDS:
        return True
    return word == "CHARACTER" and _upper(tokens, i + 1) == "SET"


def _read_default(tokens: list[_Token], i: int) -> tuple[str, int]:
    value = tokens[i].text
    i += 1
    if i < len(tokens) and tokens[i].kind == "paren":
        value += tokens[i].text
        i += 1
    return value, i


def _parse_column(tokens: list[_Token]) -> ColumnDef:
    first = tokens[0]
    if first.kind not in ("word", "ident"):
        raise DDLParseError(f"invalid column name: {first.text!r}")
    name = first.text
    type_parts: list[str] = []
    i = 1
    while i < len(tokens):
        tok = tokens[i]
        if tok.kind == "paren" and type_parts:
            type_parts[-1] += tok.text
        elif tok.kind == "word" and not _stops_type(tokens, i):
            type_parts.append(tok.text)
        else:
            break
        i += 1
    if not type_parts:
        raise DDLParseError(f"column {name!r} has no type")

    column = ColumnDef(name=name, type=" ".join(type_parts))
    while i < len(tokens):
        word = _upper(tokens, i)
        if word == "NOT" and _upper(tokens, i + 1) == "NULL":
            column.nullable = False
            i += 2
        elif word == "NULL":
            column.nullable = True
            i += 1
        elif word == "PRIMARY" and _upper(tokens, i + 1) == "KEY":
            column.primary_key = True
            i += 2
        elif word == "DEFAULT" and i + 1 < len(tokens):
            column.default, i = _read_default(tokens, i + 1)
        elif word == "COMMENT" and i + 1 < len(tokens) and tokens[i + 1].kind == "string":
            column.comment = tokens[i + 1].text
            i += 2
        else:
            i += 1
    return column


def _parse_item(table: TableDef, item: str, primary_keys: list[str]) -> None:
    tokens = list(_tokenize(item))
    if not tokens:
        raise DDLParseError(f"table {table.name!r}: empty column definition")
    head = _upper(tokens, 0)
    if head == "CONSTRAINT":
        tokens = tokens[1:] if _upper(tokens, 1) in _CONSTRAINT_HEADS else tokens[2:]
        if not tokens:
            raise DDLParseError(f"table {table.name!r}: incomplete constraint")
        head = _upper(tokens, 0)

    if head == "PRIMARY":
        primary_keys.extend(_column_list(tokens))
        return
    if head in ("FOREIGN", "CHECK", "EXCLUDE"):
        return
    if head in ("UNIQUE", "FULLTEXT", "SPATIAL") or (
        head in ("KEY", "INDEX") and not _looks_like_column(tokens)
    ):
        name = _index_name(tokens)
        if name:
            table.indexes.append(name)
        return
    table.columns.append(_parse_column(tokens))


def _read_table_name(stmt: str, pos: int) -> tuple[str, int]:
    n = len(stmt)
    parts = []
    while True:
        while pos < n and stmt[pos].isspace():
            pos += 1
        if pos < n and stmt[pos] in "\"`":
            end = _skip_quoted(stmt, pos)
            parts.append(_unquote(stmt[pos:end]))
            pos = end
        else:
            match = _NAME_RE.match(stmt, pos)
            if not match:
                raise DDLParseError("missing table name")
            parts.append(match.group())
            pos = match.end()
        look = pos
        while look < n and stmt[look].isspace():
            look += 1
        if look < n and stmt[look] == ".":
            pos = look + 1
            continue
        return parts[-1], pos


def _apply_options(table: TableDef, tail: str) -> None:
    if match := _COMMENT_OPTION.search(tail):
        table.comment = _unquote("'" + match.group(1) + "'")
    if match := _CHARSET_OPTION.search(tail):
        table.charset = match.group(1)
    if match := _COLLATE_OPTION.search(tail):
        table.collation = match.group(1)


def _parse_statement(stmt: str) -> Optional[TableDef]:
    match = _CREATE_RE.search(stmt)
    if not match:
        return None
    name, pos = _read_table_name(stmt, match.end())
    while pos < len(stmt) and stmt[pos].isspace():
        pos += 1
    if pos >= len(stmt) or stmt[pos] != "(":
        raise DDLParseError(f"table {name!r}: expected a column list")
    close = _closing_paren(stmt, pos)

    table = TableDef(name=name)
    primary_keys: list[str] = []
    for item in _split_top_level(stmt[pos + 1 : close]):
        if item.strip():
            _parse_item(table, item, primary_keys)
    if not table.columns:
        raise DDLParseError(f"table {name!r} has no columns")
    for column in table.columns:
        if column.name in primary_keys:
            column.primary_key = True
    _apply_options(table, stmt[close + 1 :])
    return table


def parse_create_tables(sql: str) -> list[TableDef]:
    """Parse every CREATE TABLE statement in ``sql``; other statements are ignored."""
    return [
        table
        for stmt in _statements(sql)
        if (table := _parse_statement(stmt)) is not None
    ]