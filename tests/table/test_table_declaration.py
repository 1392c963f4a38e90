"""Tests for Table declaration: class keywords, columns, primary key."""

import decimal
from typing import ClassVar, Optional

import pytest

from sqlfluent import ColumnType, SqliteDialect, Table, column
from tests.helpers import Spells, WizardSpells, Wizards


def test_table_name_and_alias():
    assert Wizards.get_table_name() == "wizards"
    assert Wizards.alias() == "w"
    assert WizardSpells.get_table_name() == "wizard_spells"
    assert WizardSpells.alias() == "ws"


def test_default_table_name_is_lowercased_class_name():
    class Potions(Table):
        id: int = column(primary_key=True)

    assert Potions.get_table_name() == "potions"
    assert Potions.alias() == "p"


def test_custom_alias():
    class Towers(Table, table_name="wizard_towers", alias="tw"):
        id: int

    assert Towers.alias() == "tw"


def test_default_dialect_is_sqlite():
    assert isinstance(Wizards.get_dialect(), SqliteDialect)


def test_columns_list_keeps_declaration_order():
    assert [c.name for c in Wizards.columns_list()] == ["id", "name", "guild", "level", "power"]


def test_use_prefix():
    class Users(Table, table_name="users", use_prefix=True):
        id: int = column(primary_key=True)
        name: str
        nickname: Optional[str] = column("nick")

    assert [c.key for c in Users.columns_list()] == ["users_id", "users_name", "users_nick"]
    assert Users.name.name == "name"


def test_explicit_key_and_type():
    class Ledger(Table):
        id: int = column(primary_key=True, type=ColumnType.LONG)
        amount: decimal.Decimal = column("amount_cents")
        recorded_at: int = column(type=ColumnType.DATE_TIMESTAMP)

    assert Ledger.id.type is ColumnType.LONG
    assert Ledger.amount.key == "amount_cents"
    assert Ledger.amount.type is ColumnType.DECIMAL
    assert Ledger.recorded_at.type is ColumnType.DATE_TIMESTAMP


def test_primary_key():
    assert Wizards.primary_key() is Wizards.id
    assert Wizards.has_primary_key()
    assert not WizardSpells.has_primary_key()


def test_missing_primary_key_raises():
    with pytest.raises(ValueError, match="Table wizard_spells does not have a primary key"):
        WizardSpells.primary_key()


def test_two_primary_keys_raise():
    with pytest.raises(ValueError, match="more than one primary key"):
        class Broken(Table):
            a: int = column(primary_key=True)
            b: int = column(primary_key=True)


def test_unsupported_type_raises_at_declaration():
    with pytest.raises(TypeError, match="no known conversion to SQL type"):
        class Broken(Table):
            tags: list[str]


def test_plain_default_value_raises():
    with pytest.raises(TypeError, match="must be declared with column"):
        class Broken(Table):
            level: int = 3


def test_column_name_colliding_with_table_api_raises():
    with pytest.raises(ValueError, match="collides with the Table API"):
        class Broken(Table):
            alias: str


def test_private_and_classvar_annotations_are_not_columns():
    class Notes(Table):
        _cache: dict = {}
        VERSION: ClassVar[int] = 2
        id: int = column(primary_key=True)

    assert [c.name for c in Notes.columns_list()] == ["id"]
    assert Notes.VERSION == 2


def test_get_column():
    assert Spells.get_column("title") is Spells.title
    with pytest.raises(KeyError, match="no column `colour`"):
        Spells.get_column("colour")


def test_get_column_by_physical_key():
    class Users(Table, use_prefix=True):
        id: int = column(primary_key=True)

    assert Users.get_column("users_id") is Users.id


def test_subclass_inherits_columns():
    class Named(Table):
        id: int = column(primary_key=True)
        name: str

    class Pets(Named, table_name="pets"):
        species: str

    assert [c.name for c in Pets.columns_list()] == ["id", "name", "species"]
    assert Pets.id.table is Pets
    assert Pets.primary_key() is Pets.id
    assert Named.id.table is Named
