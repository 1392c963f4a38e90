from sqlfluent.utils.acronym import acronym


def test_acronym():
    assert acronym("wizards") == "w"
    assert acronym("wizard_spells") == "ws"
    assert acronym("table_name_here") == "tnh"


def test_acronym_ignores_empty_words():
    assert acronym("_wizard__spells_") == "ws"
