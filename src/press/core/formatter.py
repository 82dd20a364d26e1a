"""Text helpers shared by the catalog models."""

import re
import unicodedata

_APOSTROPHES = re.compile(r"['’‘]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def make_url_safe(text: str) -> str:
    """Turn a display name into a URL slug.

    Accents are stripped, apostrophes dropped, and any other run of
    non-alphanumerics collapses to a single hyphen:
    ``"Émile Zola's Friend"`` -> ``"emile-zolas-friend"``.
    """
    value = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    value = _APOSTROPHES.sub("", value.lower())
    return _NON_ALNUM.sub("-", value).strip("-")


def trim_to_none(value: str | None) -> str | None:
    """Strip whitespace; empty strings become None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
