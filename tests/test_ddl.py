import pytest

from sqlproto.ddl import DDLParseError, parse_create_tables


USERS_SQL = """
CREATE TABLE users (
    id INT PRIMARY KEY,
    name VARCHAR(100) NOT NULL,
    email VARCHAR(100) NULL,
    age INT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""


def test_parses_columns_in_order():
    tables = parse_create_tables(USERS_SQL)
    assert [t.name for t in tables] == ["users"]
    columns = tables[0].columns
    assert [c.name for c in columns] == ["id", "name", "email", "age", "created_at"]
    assert [c.type for c in columns] == ["INT", "VARCHAR(100)", "VARCHAR(100)", "INT", "DATETIME"]


def test_nullability_and_primary_key():
    columns = {c.name: c for c in parse_create_tables(USERS_SQL)[0].columns}
    assert columns["id"].primary_key
    assert not columns["name"].nullable
    assert columns["email"].nullable
    assert columns["age"].nullable
    assert not columns["name"].primary_key


def test_default_values():
    sql = "CREATE TABLE t (a INT DEFAULT 0, b VARCHAR(10) DEFAULT 'READ', c DATETIME DEFAULT CURRENT_TIMESTAMP);"
    columns = parse_create_tables(sql)[0].columns
    assert [c.default for c in columns] == ["0", "READ", "CURRENT_TIMESTAMP"]


def test_column_and_table_comments_and_options():
    sql = (
        "CREATE TABLE products (id INT PRIMARY KEY COMMENT 'ProductID', "
        "price DECIMAL(10, 2) NOT NULL COMMENT 'ProductPrice') "
        "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4 COLLATE=utf8mb4_bin COMMENT='Products';"
    )
    table = parse_create_tables(sql)[0]
    assert [c.comment for c in table.columns] == ["ProductID", "ProductPrice"]
    assert table.columns[1].type == "DECIMAL(10, 2)"
    assert table.comment == "Products"
    assert table.charset == "utf8mb4"
    assert table.collation == "utf8mb4_bin"


def test_multiple_tables_keep_order():
    sql = """
    CREATE TABLE users (id INT PRIMARY KEY, name VARCHAR(100) NOT NULL) CHARSET=utf8mb4;
    CREATE TABLE posts (id INT PRIMARY KEY, title VARCHAR(255) NOT NULL, content TEXT) CHARSET=utf8mb4;
    """
    tables = parse_create_tables(sql)
    assert [t.name for t in tables] == ["users", "posts"]
    assert all(t.charset == "utf8mb4" for t in tables)


def test_table_level_primary_key_and_indexes():
    sql = """
    CREATE TABLE user_groups (
        user_id BIGINT NOT NULL,
        group_id BIGINT NOT NULL,
        note TEXT,
        PRIMARY KEY (user_id, group_id),
        KEY idx_note (note(10)),
        UNIQUE KEY uk_group (group_id),
        CONSTRAINT fk_user FOREIGN KEY (user_id) REFERENCES users (id)
    );
    """
    table = parse_create_tables(sql)[0]
    assert [c.name for c in table.columns] == ["user_id", "group_id", "note"]
    assert [c.primary_key for c in table.columns] == [True, True, False]
    assert table.indexes == ["idx_note", "uk_group"]


def test_column_named_key_is_a_column():
    sql = "CREATE TABLE settings (id INT PRIMARY KEY, key VARCHAR(100), value VARCHAR(255));"
    table = parse_create_tables(sql)[0]
    assert [c.name for c in table.columns] == ["id", "key", "value"]
    assert table.indexes == []


def test_quoted_names_and_schema_prefix():
    sql = 'CREATE TABLE IF NOT EXISTS public."order items" (`id` BIGINT NOT NULL, "full name" CHARACTER VARYING(20));'
    table = parse_create_tables(sql)[0]
    assert table.name == "order items"
    assert [c.name for c in table.columns] == ["id", "full name"]
    assert table.columns[1].type == "CHARACTER VARYING(20)"


def test_comments_and_semicolons_in_strings():
    sql = """
    -- leading comment; not a statement
    /* block; comment */
    CREATE TABLE notes (
        body TEXT COMMENT 'a;b',  # trailing comment
        id INT
    );
    """
    tables = parse_create_tables(sql)
    assert len(tables) == 1
    assert tables[0].columns[0].comment == "a;b"
    assert [c.name for c in tables[0].columns] == ["body", "id"]


def test_other_statements_are_ignored():
    assert parse_create_tables("INVALID SQL STATEMENT") == []
    assert parse_create_tables("") == []


def test_unterminated_string_raises():
    with pytest.raises(DDLParseError):
        parse_create_tables("CREATE TABLE t (a INT COMMENT 'oops);")


def test_unbalanced_parentheses_raise():
    with pytest.raises(DDLParseError):
        parse_create_tables("CREATE TABLE t (a INT, b VARCHAR(10)")


def test_column_without_type_raises():
    with pytest.raises(DDLParseError):
        parse_create_tables("CREATE TABLE t (a NOT NULL);")


def test_missing_column_list_raises():
    with pytest.raises(DDLParseError):
        parse_create_tables("CREATE TABLE t AS SELECT 1;")