"""Canonical keys for free-text items entered by participants."""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")


def normalize_item(text: object) -> str:
    """Normalize a raw item into the key used for matching.

    Steps run in a fixed order: lowercase, NFD, drop combining marks,
    drop whitespace, drop anything outside [a-z0-9].
    Example:
        "Café au lait" -> "cafeaulait"
        "  Ice-Cream! " -> "icecream"
    """
    if not isinstance(text, str):
        return ""
    text = text.lower()
    text = unicodedata.normalize("NFD", text)
    text = _COMBINING_MARKS_RE.sub("", text)
    text = _WHITESPACE_RE.sub("", text)
    text = _NON_ALNUM_RE.sub("", text)
    return text
