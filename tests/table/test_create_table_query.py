from sqlfluent import Query, create_table_query
from tests.helpers import WizardSpells, Wizards


def test_create_table_query():
    assert create_table_query(Wizards) == Query(
        "CREATE TABLE IF NOT EXISTS wizards "
        "(id INTEGER PRIMARY KEY, name TEXT, guild TEXT, level INTEGER, power REAL)"
    )


def test_create_table_query_without_primary_key():
    query = create_table_query(WizardSpells)
    assert query.sql == (
        "CREATE TABLE IF NOT EXISTS wizard_spells "
        "(wizard_id INTEGER, spell_id INTEGER, mastery INTEGER)"
    )
    assert query.args == ()


def test_create_table_query_runs(db):
    names = {name for name, in db.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {"wizards", "spells", "wizard_spells"} <= names
