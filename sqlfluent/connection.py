"""Named database connections configured by URL."""

import urllib.parse

from .dialects import Dialect, get_dialect_for_scheme


_urls: dict[str, str] = {}


def connect(database_url: str, name: str = "default") -> None:
    """Register ``database_url`` (e.g. ``sqlite:///app.db``) under ``name``; nothing is opened yet."""
    get_dialect_for_scheme(urllib.parse.urlparse(database_url).scheme)
    _urls[name] = database_url


def get_dialect(name: str = "default") -> Dialect:
    """Dialect for the URL registered under ``name``."""
    return get_dialect_for_scheme(urllib.parse.urlparse(_get_url(name)).scheme)


def get_connection(name: str = "default"):
    """Open a new DB-API connection for the URL registered under ``name``."""
    url = _get_url(name)
    return get_dialect_for_scheme(urllib.parse.urlparse(url).scheme).connect(url)


def _get_url(name: str) -> str:
    try:
        return _urls[name]
    except KeyError as error:
        raise ValueError(f"No connection configured with name=`{name}`") from error
