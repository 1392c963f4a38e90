"""Default table alias from a table name."""


def acronym(name: str) -> str:
    """First letter of each underscore-separated word (``wizard_spells`` -> ``ws``)."""
    return "".join(word[0] for word in name.split("_") if word)
