"""Free-text helpers for ingredient rows.

Turns the loosely formatted name / raw strings stored per recipe into:
  - a display name (clean_name)
  - a deduplication key (normalize_key)
  - a short human-readable amount (clean_amount)
"""
import re
from typing import Optional

from pepper.utilities.constants import PREP_DESCRIPTORS, STATE_DESCRIPTORS, UNIT_WORDS

_LEADING_NON_ALPHA = re.compile(r'^[^A-Za-z]+')
_DESCRIPTORS = re.compile(r'\b(?:' + '|'.join(STATE_DESCRIPTORS + PREP_DESCRIPTORS) + r')\b')
_WHITESPACE = re.compile(r'\s+')
_PRICE_NOTE = re.compile(r'\([^)]*\$[^)]*\)')
_QUANTITY = re.compile(r'^[\d/½¼¾]+$')


def clean_name(raw_name: Optional[str]) -> str:
    """Drop leading punctuation/fraction debris and capitalize the first letter.

    "¼cup flour" style fragments leak into the name column now and then;
    anything before the first letter is discarded. Returns "" when no letter is left.
    """
    name = _LEADING_NON_ALPHA.sub('', raw_name or '')
    if not name:
        return ''
    return name[0].upper() + name[1:]


def normalize_key(cleaned_name: str) -> str:
    """Lower-case key with state/prep descriptors removed ("Fresh chopped onion" -> "onion")."""
    key = (cleaned_name or '').strip().lower()
    key = _DESCRIPTORS.sub(' ', key)
    return _WHITESPACE.sub(' ', key).strip()


def is_quantity_or_unit(word: str) -> bool:
    if not word:
        return False
    if _QUANTITY.match(word):
        return True
    return word.lower() in UNIT_WORDS


def _format_qty(qty) -> str:
    if qty is None:
        return ''
    if isinstance(qty, float) and qty.is_integer():
        return str(int(qty))
    return str(qty)


def clean_amount(raw: Optional[str], qty=None, unit: Optional[str] = None) -> str:
    """Extract the leading quantity/unit part of a raw ingredient line.

    "2 tablespoons extra virgin olive oil ($3.50)" -> "2 tablespoons".
    The first word is always kept; scanning stops at the first word that is
    neither a number nor a known unit. Falls back to "<qty> <unit>".
    """
    if raw:
        text = _PRICE_NOTE.sub('', raw)
        text = text.split(',', 1)[0]
        kept = []
        for i, word in enumerate(text.split()):
            if i == 0 or is_quantity_or_unit(word):
                kept.append(word)
            else:
                break
        amount = ' '.join(kept).strip()
        if amount:
            return amount
    return f"{_format_qty(qty)} {unit or ''}".strip()


__all__ = ['clean_name', 'normalize_key', 'is_quantity_or_unit', 'clean_amount']
