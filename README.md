# sqlproto

`sqlproto` reads SQL `CREATE TABLE` statements and turns each table into a
description that is ready for a Protobuf service definition. Each description
holds the table name, its comment, charset and collation, and for every column
a field name, a Protobuf scalar type, whether it may be NULL, and its comment.
From these descriptions it builds the template data for a gRPC or a REST
service.

It has no dependencies beyond the standard library.

## Converting a schema

```python
from sqlproto.converter import convert

sql = """
CREATE TABLE users (
    id INT PRIMARY KEY COMMENT 'UserID',
    name VARCHAR(100) NOT NULL,
    email VARCHAR(100) NULL
) COMMENT='User table';
"""

tables = convert(sql)
for table in tables:
    print(table.name, table.comment)
    for field in table.fields:
        print(" ", field.name, field.type, field.null, field.comment)
```

`convert(dsn, include_tables=None, exclude_tables=None, mux=None)` returns a
list of `sqlproto.types.TableData`, one per table, in the order the tables
appear in the SQL.

- `include_tables`, when not empty, keeps only the tables named in it.
- `exclude_tables`, when not empty, then drops the tables named in it.
- `mux` is the provider registry to use; by default `sqlproto.mux.DEFAULT`.

A primary key column is never nullable. A column with neither `NULL` nor
`NOT NULL` is nullable. A column type with no mapping becomes `string`.

### Where the SQL comes from

The schema source is a DSN with a scheme:

- `text://<sql>` holds the SQL statements themselves.
- `file://<path>` names a file that holds the SQL statements (read as UTF-8).

`sqlproto.converter.normalize_dsn` adds the scheme for you: a value that
already contains `://` stays as it is, an existing path gets `file://`, and
anything else is treated as SQL text and gets `text://`.

`sqlproto.mux.Mux` maps schemes to providers. `register_provider(provider,
*schemes)` registers a callable that takes the part of the DSN after `://` and
returns a `ConvertDriver(dialect, schema_name)`; `open_convert(dsn)` picks the
provider by scheme. `DEFAULT` has `text_provider` registered for `text` and
`file`. `parse_dsn(url)` splits a DSN into scheme and rest.

## Lower-level pieces

- `sqlproto.ddl.parse_create_tables(sql)` parses every `CREATE TABLE`
  statement into `TableDef` objects (name, comment, charset, collation,
  `columns` of `ColumnDef`, `indexes`), ignoring other statements and SQL
  comments. Table-level `PRIMARY KEY (...)`, `UNIQUE`, `KEY`/`INDEX`,
  `FOREIGN KEY` and `CHECK` clauses are understood. Malformed statements raise
  `DDLParseError`.
- `sqlproto.convert` holds `TextConverter` (with `load_sql()`,
  `field_type(sql_type)` and `schema_tables()`), `new_convert(options)`,
  `convert_table(field_type, table)` and `schema_tables(field_type, tables)`.
  Options are given as `sqlproto.types.ConvertOptions`.
- `sqlproto.types` holds the records `FieldData`, `TableData` (with
  `with_comment()`), `ConvertOptions` and `Options`.

## Type mapping

`mysql_field_type` and `postgres_field_type` in `sqlproto.typemap` take a SQL
type such as `VARCHAR(255)` or `bigint`, upper-case it, drop the part in
parentheses, and return the Protobuf scalar type: `int32`, `int64`, `uint32`,
`uint64`, `float`, `double`, `string`, `bytes` or `bool`. An unknown type
gives an empty string. Decimal, date/time, enum, JSON and UUID types map to
`string`. The text converter tries the MySQL table first, then the
PostgreSQL one.

## Service data

`sqlproto.render` prepares the data for a service definition:

- `build_service_data(service_type, target_module, source_module, version,
  table)` and `build_services_data(..., tables)` take a service type (`"grpc"`
  or `"rest"`, case and surrounding spaces ignored). Any other service type
  raises `ValueError`.
- For gRPC the result is a `sqlproto.templates.GrpcProtoTemplateData` with
  `pascal_name()`, `snake_name()` and `package()` (`<module>.service.<version>`),
  and its `fields` from `proto_fields(table)`, numbered from 1 in column order.
- For REST the result is a `RestProtoTemplateData` with `pascal_name()`,
  `path()` such as `/admin/v1/users`, `source_proto()` such as
  `user/service/v1/user.proto`, `source_package()` and `target_package()`.
- The model name is the singular form of the table name, and a trailing `表`
  or `table` is removed from the table comment
  (`remove_table_comment_suffix`).

`sqlproto.naming` provides `singular`, `plural`, `pascal_case`, `snake_case`
and `kebab_case`.

## Errors

- Empty SQL, SQL that cannot be parsed, or SQL with no `CREATE TABLE`
  statement raise `sqlproto.convert.ConvertError`, as does an unsupported
  dialect or a missing driver in `new_convert`.
- A DSN without `://` or with an unregistered scheme raises `ValueError` from
  `Mux.open_convert`.

## What it does not do

- It does not connect to a database. Only SQL text and SQL files are read;
  no provider for `mysql://` or `postgres://` DSNs is registered.
- It does not write `.proto` files. It produces the template data for them;
  rendering and writing the files is left to the caller.
- It has no command-line tool; use it as a library.