"""Fixtures and helpers for integration tests against real databases."""

from __future__ import annotations

import os
import re
import shutil
import subprocess
from typing import Any

import pytest

from pyinsertsql import Result
from pyinsertsql.dialect import MYSQL, POSTGRES, SQLITE, Dialect


# ---------------------------------------------------------------------------
# Container runtime detection (Docker or Podman)
# ---------------------------------------------------------------------------

def _get_podman_socket() -> str | None:
    """Get the Podman machine socket path, if available."""
    try:
        result = subprocess.run(
            ["podman", "machine", "inspect", "--format",
             "{{.ConnectionInfo.PodmanSocket.Path}}"],
            capture_output=True, text=True, check=True, timeout=5,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired,
            FileNotFoundError):
        return None
    sock = result.stdout.strip()
    if sock and os.path.exists(sock):
        return sock
    return None


def _container_runtime_available() -> bool:
    for cmd in ["docker", "podman"]:
        if not shutil.which(cmd):
            continue
        try:
            subprocess.run(
                [cmd, "info"], capture_output=True, check=True, timeout=10,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired,
                FileNotFoundError):
            continue
        return True
    return False


def _configure_testcontainers_for_podman() -> None:
    if not shutil.which("podman"):
        return
    # Podman does not always support the Ryuk resource reaper
    os.environ.setdefault("TESTCONTAINERS_RYUK_DISABLED", "true")
    if "DOCKER_HOST" not in os.environ:
        sock = _get_podman_socket()
        if sock:
            os.environ["DOCKER_HOST"] = f"unix://{sock}"


CONTAINER_RUNTIME_AVAILABLE = _container_runtime_available()

if CONTAINER_RUNTIME_AVAILABLE:
    _configure_testcontainers_for_podman()


# ---------------------------------------------------------------------------
# Table setup per dialect
# ---------------------------------------------------------------------------

PG_DDL = """
    CREATE TABLE IF NOT EXISTS people (
        id SERIAL PRIMARY KEY,
        name TEXT NOT NULL DEFAULT 'anonymous',
        age INTEGER,
        height DOUBLE PRECISION,
        active BOOLEAN,
        role TEXT,
        email TEXT
    )
"""

MYSQL_DDL = """
    CREATE TABLE IF NOT EXISTS people (
        id INTEGER AUTO_INCREMENT PRIMARY KEY,
        name VARCHAR(255) NOT NULL DEFAULT 'anonymous',
        age INTEGER,
        height DOUBLE,
        active BOOLEAN,
        role VARCHAR(32),
        email VARCHAR(255)
    )
"""

SQLITE_DDL = """
    CREATE TABLE IF NOT EXISTS people (
        id INTEGER PRIMARY KEY,
        name TEXT NOT NULL DEFAULT 'anonymous',
        age INTEGER,
        height REAL,
        active INTEGER,
        role TEXT,
        email TEXT
    )
"""


# ---------------------------------------------------------------------------
# Session-scoped container fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def pg_container():
    if not CONTAINER_RUNTIME_AVAILABLE:
        pytest.skip("No container runtime (Docker/Podman) available")
    from testcontainers.postgres import PostgresContainer
    with PostgresContainer("postgres:16") as pg:
        yield pg


@pytest.fixture(scope="session")
def mysql_container():
    if not CONTAINER_RUNTIME_AVAILABLE:
        pytest.skip("No container runtime (Docker/Podman) available")
    from testcontainers.mysql import MySqlContainer
    with MySqlContainer("mysql:8.4") as mysql:
        yield mysql


# ---------------------------------------------------------------------------
# Database fixtures (connection + empty table)
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def pg_conn(pg_container):
    import psycopg
    conn = psycopg.connect(
        host=pg_container.get_container_host_ip(),
        port=pg_container.get_exposed_port(5432),
        user=pg_container.username,
        password=pg_container.password,
        dbname=pg_container.dbname,
    )
    with conn.cursor() as cur:
        cur.execute(PG_DDL)
    conn.commit()
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def mysql_conn(mysql_container):
    import mysql.connector
    conn = mysql.connector.connect(
        host=mysql_container.get_container_host_ip(),
        port=int(mysql_container.get_exposed_port(3306)),
        user=mysql_container.username,
        password=mysql_container.password,
        database=mysql_container.dbname,
    )
    cur = conn.cursor()
    cur.execute(MYSQL_DDL)
    conn.commit()
    cur.close()
    yield conn
    conn.close()


@pytest.fixture
def pg_db(pg_conn):
    with pg_conn.cursor() as cur:
        cur.execute("DELETE FROM people")
    pg_conn.commit()
    return pg_conn


@pytest.fixture
def mysql_db(mysql_conn):
    cur = mysql_conn.cursor()
    cur.execute("DELETE FROM people")
    mysql_conn.commit()
    cur.close()
    return mysql_conn


@pytest.fixture
def sqlite_db():
    import sqlite3
    conn = sqlite3.connect(":memory:")
    conn.execute(SQLITE_DDL)
    conn.commit()
    yield conn
    conn.close()


# ---------------------------------------------------------------------------
# Statement execution helpers
# ---------------------------------------------------------------------------

def _adapt_params_for_driver(sql: str, db_name: str) -> str:
    """Adapt parameter placeholders for the database driver.

    - PostgreSQL ($1, $2): psycopg uses %s placeholders
    - MySQL (?): mysql-connector uses %s
    - SQLite (?): native support, no change needed
    """
    if db_name == "pg":
        return re.sub(r"\$\d+", "%s", sql)
    if db_name == "mysql":
        return sql.replace("?", "%s")
    return sql


def execute_result(conn, result: Result, db_name: str) -> list[tuple[Any, ...]]:
    """Execute a rendered statement and commit.

    Returns the rows produced by a RETURNING clause, or an empty list.
    """
    sql = _adapt_params_for_driver(result.sql, db_name)
    params = result.driver_parameters()

    if db_name == "sqlite":
        cur = conn.execute(sql, params)
        rows = cur.fetchall()
        conn.commit()
        return rows

    cur = conn.cursor()
    cur.execute(sql, tuple(params))
    rows = cur.fetchall() if cur.description else []
    conn.commit()
    cur.close()
    return rows


def fetch_people(conn, db_name: str) -> list[dict[str, Any]]:
    """Return every row of the people table, ordered by id."""
    query = "SELECT name, age, height, active, role, email FROM people ORDER BY id"
    if db_name == "sqlite":
        cur = conn.execute(query)
    else:
        cur = conn.cursor()
        cur.execute(query)
    columns = [d[0] for d in cur.description]
    rows = [dict(zip(columns, row)) for row in cur.fetchall()]
    if db_name != "sqlite":
        cur.close()
    return rows


# ---------------------------------------------------------------------------
# Parametrized database fixture
# ---------------------------------------------------------------------------

ALL_DBS = ["pg", "mysql", "sqlite"]
RETURNING_DBS = ["pg", "sqlite"]

_DIALECTS: dict[str, Dialect] = {
    "pg": POSTGRES,
    "mysql": MYSQL,
    "sqlite": SQLITE,
}


@pytest.fixture(params=ALL_DBS)
def db(request):
    """Yields (connection, dialect, db_name) for each database."""
    name = request.param
    conn = request.getfixturevalue(f"{name}_db")
    return conn, _DIALECTS[name], name


@pytest.fixture(params=RETURNING_DBS)
def returning_db(request):
    """Databases that accept DEFAULT VALUES and RETURNING."""
    name = request.param
    conn = request.getfixturevalue(f"{name}_db")
    return conn, _DIALECTS[name], name
