import pytest

from sqlfluent import connect, create_table_query, get_connection
from sqlfluent.transaction import reset_transaction_managers
from tests.helpers import ALL_TABLES


@pytest.fixture(scope="function")
def database_url(tmp_path):
    """URL of a fresh SQLite file, registered as the default connection."""
    url = f"sqlite:///{tmp_path}/sqlfluent.sqlite3"
    connect(url)
    yield url
    reset_transaction_managers()


@pytest.fixture(scope="function")
def db(database_url):
    """Open connection on a database holding the test schema (wizards, spells, wizard_spells)."""
    conn = get_connection()
    for table in ALL_TABLES:
        conn.execute(create_table_query(table).sql)
    conn.commit()
    yield conn
    conn.close()
