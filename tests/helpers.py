"""Shared test schema."""

from typing import Optional

from sqlfluent import ColumnType, Table, column


class Wizards(Table, table_name="wizards"):
    id: int = column(primary_key=True)
    name: str
    guild: Optional[str]
    level: int
    power: float = column(type=ColumnType.FLOAT)


class Spells(Table, table_name="spells"):
    id: int = column(primary_key=True)
    title: str
    mana_cost: int


class WizardSpells(Table, table_name="wizard_spells"):
    wizard_id: int
    spell_id: int
    mastery: Optional[int]


ALL_TABLES = (Wizards, Spells, WizardSpells)
