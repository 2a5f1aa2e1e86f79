"""Filename cleanup for exported HTML and image assets."""
from __future__ import annotations

import re

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9\s.\-]")
_WHITESPACE_RUN = re.compile(r"\s+")
_WORD_EXTENSION = re.compile(r"\.docx?")


def clean_filename(name: str) -> str:
    """Lowercase ``name`` and reduce it to a hyphenated, URL-safe stem.

    Characters other than ``a-z``, digits, whitespace, ``.`` and ``-`` are
    dropped, whitespace runs become a single hyphen, and ``.doc``/``.docx``
    are removed.
    """
    file_name = _DISALLOWED_CHARS.sub("", name.lower())
    file_name = _WHITESPACE_RUN.sub("-", file_name)
    return _WORD_EXTENSION.sub("", file_name)
