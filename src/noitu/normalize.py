"""Unicode and Vietnamese-specific normalization utilities.

Policy:
- Apply NFC before character-class checks for consistency.
- For matching: lowercase, strip combining marks (U+0300..U+036F), fold đ/Đ to d/D.
  Case is left alone by ``normalize_vietnamese``; callers lowercase first.
"""

from __future__ import annotations

import re
import unicodedata as ud

# Combining Diacritical Marks block only; other Mn characters are kept.
_COMBINING_RE = re.compile("[\u0300-\u036f]")

PAIR_KEY_SEPARATOR = "-"


def normalize_text_nfc(text: str) -> str:
    """Apply Unicode NFC to input text (safe for None-like inputs)."""
    if text is None:
        return ""
    return ud.normalize("NFC", str(text))


def normalize_vietnamese(text: str) -> str:
    """Strip diacritics and fold đ/Đ, preserving case.

    "đất" -> "dat", "Đất" -> "Dat". Idempotent; accented letters from other
    Latin-script languages are stripped as well.
    """
    if not text:
        return ""
    # Decompose first to expose combining marks consistently.
    decomposed = ud.normalize("NFD", str(text))
    stripped = _COMBINING_RE.sub("", decomposed)
    # đ is a base letter, not d + mark, so NFD leaves it alone.
    return stripped.replace("đ", "d").replace("Đ", "D")


def fold_syllable(text: str) -> str:
    """Comparison form of a syllable: lowercased then normalized."""
    if not text:
        return ""
    return normalize_vietnamese(text.lower())


def pair_key(first: str, second: str) -> str:
    """Key identifying a word pair for history and used-word checks."""
    return f"{fold_syllable(first)}{PAIR_KEY_SEPARATOR}{fold_syllable(second)}"
