"""Tests for sqlfluent.query.insert.Insert."""

import pytest

from sqlfluent import Insert, InsertFilter, Query
from tests.helpers import Spells, Wizards


def test_insert():
    insert = Wizards.insert(lambda i: i.set(Wizards.name, "Merlin").set(Wizards.level, 9))
    assert insert.sql_args() == Query("INSERT INTO wizards (name, level) VALUES (?, ?)", "Merlin", 9)


def test_none_values_are_dropped():
    insert = Wizards.insert(lambda i: i.set(Wizards.name, "Merlin").set(Wizards.guild, None))
    assert insert.sql_args() == Query("INSERT INTO wizards (name) VALUES (?)", "Merlin")


def test_falsy_values_are_kept():
    insert = Wizards.insert(lambda i: i.set(Wizards.level, 0).set(Wizards.name, ""))
    assert insert.sql_args().args == (0, "")


def test_insert_without_columns_raises():
    with pytest.raises(ValueError, match="No columns specified for insert"):
        Insert(Wizards).sql_args()
    with pytest.raises(ValueError, match="No columns specified for insert"):
        Wizards.insert(lambda i: i.set(Wizards.guild, None)).sql_args()


def test_column_of_another_table_raises():
    with pytest.raises(ValueError, match="belongs to spells"):
        Insert(Wizards).set(Spells.title, "Fireball")


def test_filter():
    insert = Wizards.insert(lambda i: i.set(Wizards.name, "Merlin")).filter(
        lambda f: f.unique(Wizards.name, "Merlin")
    )
    assert isinstance(insert.filters(), InsertFilter)
    assert len(insert.filters().filters()) == 1


def test_no_filter_by_default():
    assert Insert(Wizards).filters() is None
