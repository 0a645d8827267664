"""Slug derivation for article titles."""

import re

from django.utils.text import slugify
from unidecode import unidecode

_SEPARATOR_RUN = re.compile(r"[\W_]+")


def slug_from_title(title: str | None) -> str:
    """Return the lowercase, dash-separated slug for ``title``.

    The title is transliterated to ASCII first (``"Привет мир"`` becomes
    ``"privet-mir"``). Every run of characters that is not a letter or digit
    then becomes a single dash; leading and trailing dashes are dropped.

    >>> slug_from_title("Title for article")
    'title-for-article'
    """
    if not title:
        return ""
    return slugify(_SEPARATOR_RUN.sub(" ", unidecode(str(title))))


__all__ = ["slug_from_title"]
