"""Tests for sqlfluent.query.join.Join and Select.join."""

import pytest

from sqlfluent import Join, Query
from sqlfluent.expressions import JoinContext, JoinType
from tests.helpers import Spells, WizardSpells, Wizards


def test_join_on_the_right_side():
    select = Wizards.select(Wizards.name).join(lambda j: j.left(Wizards.id, WizardSpells.wizard_id))
    assert select.sql_args().sql == (
        "SELECT w.name FROM wizards w LEFT JOIN wizard_spells ws ON w.id = ws.wizard_id"
    )


def test_join_on_the_left_side():
    select = Wizards.select(Wizards.name).join(lambda j: j.inner(WizardSpells.wizard_id, Wizards.id))
    assert select.sql_args().sql == (
        "SELECT w.name FROM wizards w INNER JOIN wizard_spells ws ON ws.wizard_id = w.id"
    )


def test_chained_joins():
    select = (
        Wizards.select(Wizards.name, Spells.title)
        .join(lambda j: j.inner(WizardSpells.wizard_id, Wizards.id))
        .join(lambda j: j.inner(Spells.id, WizardSpells.spell_id))
        .where(lambda w: w.lt(Spells.mana_cost, 50))
    )
    assert select.sql_args() == Query(
        "SELECT w.name, s.title FROM wizards w "
        "INNER JOIN wizard_spells ws ON ws.wizard_id = w.id "
        "INNER JOIN spells s ON s.id = ws.spell_id "
        "WHERE s.mana_cost < ?",
        50,
    )


def test_chained_join_with_known_table_on_the_left():
    select = (
        Wizards.select(Wizards.name, Spells.title)
        .join(lambda j: j.inner(WizardSpells.wizard_id, Wizards.id))
        .join(lambda j: j.inner(WizardSpells.spell_id, Spells.id))
    )
    assert select.joins[1].table is Spells
    assert select.sql_args().sql == (
        "SELECT w.name, s.title FROM wizards w "
        "INNER JOIN wizard_spells ws ON ws.wizard_id = w.id "
        "INNER JOIN spells s ON ws.spell_id = s.id"
    )


def test_join_registers_alias_in_context():
    select = Wizards.select(Wizards.id).join(lambda j: j.inner(WizardSpells.wizard_id, Wizards.id))
    assert select.join_context.table_alias(WizardSpells) == "ws"
    assert select.join_context.table_alias(Spells) is None


@pytest.mark.parametrize("method,keyword", [
    ("left", "LEFT"), ("right", "RIGHT"), ("inner", "INNER"), ("outer", "OUTER"), ("full", "FULL"),
])
def test_join_types(method, keyword):
    select = Wizards.select(Wizards.id).join(lambda j: getattr(j, method)(Wizards.id, WizardSpells.wizard_id))
    assert f" {keyword} JOIN wizard_spells ws " in select.sql_args().sql


def test_empty_join_raises():
    with pytest.raises(ValueError, match="Join clause cannot be empty"):
        Wizards.select(Wizards.id).join(lambda j: None)


def test_last_pairing_wins():
    join = Join(Wizards).inner(Wizards.id, WizardSpells.wizard_id).left(Wizards.id, Spells.id)
    assert join.expression.table is Spells
    assert join.expression.type is JoinType.LEFT


def test_unrelated_tables_join_right_side_on_tie():
    join = Join(Wizards).inner(WizardSpells.spell_id, Spells.id)
    assert join.expression.table is Spells


def test_unregistered_side_is_joined():
    context = JoinContext()
    context.add_table(Spells)
    join = Join(Wizards, context).inner(WizardSpells.spell_id, Spells.id)
    assert join.expression.table is WizardSpells
    assert context.table_alias(WizardSpells) is None


def test_only_the_kept_pairing_is_registered():
    select = Wizards.select(Wizards.id).join(
        lambda j: j.inner(WizardSpells.wizard_id, Wizards.id).inner(Spells.id, Wizards.id)
    )
    assert select.join_context.table_alias(Spells) == "s"
    assert select.join_context.table_alias(WizardSpells) is None
    select.join(lambda j: j.inner(WizardSpells.spell_id, Spells.id))
    assert select.joins[1].table is WizardSpells
    assert select.sql_args().sql == (
        "SELECT w.id FROM wizards w "
        "INNER JOIN spells s ON s.id = w.id "
        "INNER JOIN wizard_spells ws ON ws.spell_id = s.id"
    )


def test_context_keeps_first_alias():
    context = JoinContext()
    context.table_aliases[Spells] = "sp"
    context.add_table(Spells)
    assert context.table_alias(Spells) == "sp"
