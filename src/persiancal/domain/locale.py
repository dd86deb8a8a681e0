"""Month names, weekday names, and digit glyph tables.

All tables are module-level constants and never mutated.
"""

from __future__ import annotations

# (Persian, English transliteration), indexed by month - 1.
MONTH_NAMES: tuple[tuple[str, str], ...] = (
    ("فروردین", "Farvardin"),
    ("اردیبهشت", "Ordibehesht"),
    ("خرداد", "Khordad"),
    ("تیر", "Tir"),
    ("مرداد", "Mordad"),
    ("شهریور", "Shahrivar"),
    ("مهر", "Mehr"),
    ("آبان", "Aban"),
    ("آذر", "Azar"),
    ("دی", "Dey"),
    ("بهمن", "Bahman"),
    ("اسفند", "Esfand"),
)

# Persian week, Saturday first.
WEEKDAY_NAMES: tuple[tuple[str, str], ...] = (
    ("شنبه", "Shanbeh"),
    ("یکشنبه", "Yekshanbeh"),
    ("دوشنبه", "Doshanbeh"),
    ("سه‌شنبه", "Seshanbeh"),
    ("چهارشنبه", "Chaharshanbeh"),
    ("پنجشنبه", "Panjshanbeh"),
    ("جمعه", "Jomeh"),
)

LATIN_DIGITS = "0123456789"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans(LATIN_DIGITS, PERSIAN_DIGITS)
_TO_LATIN = str.maketrans(PERSIAN_DIGITS + ARABIC_INDIC_DIGITS, LATIN_DIGITS * 2)

_PERSIAN_TO_MONTH = {persian: i for i, (persian, _) in enumerate(MONTH_NAMES, start=1)}
_ENGLISH_TO_MONTH = {english.lower(): i for i, (_, english) in enumerate(MONTH_NAMES, start=1)}


def month_name_persian(month: int) -> str:
    """Persian name of *month*, or ``""`` outside ``1..12``."""
    if month < 1 or month > len(MONTH_NAMES):
        return ""
    return MONTH_NAMES[month - 1][0]


def month_name_english(month: int) -> str:
    """English transliteration of *month*, or ``""`` outside ``1..12``."""
    if month < 1 or month > len(MONTH_NAMES):
        return ""
    return MONTH_NAMES[month - 1][1]


def month_from_persian_name(name: str) -> int:
    """Month number for a Persian month name, 0 if unknown."""
    return _PERSIAN_TO_MONTH.get(name.strip(), 0)


def month_from_english_name(name: str) -> int:
    """Month number for an English month name (case-insensitive), 0 if unknown."""
    return _ENGLISH_TO_MONTH.get(name.strip().lower(), 0)


def weekday_name(index: int, *, english: bool = False) -> str:
    """Name of the Persian weekday *index* (0 = Saturday ... 6 = Friday)."""
    persian, latin = WEEKDAY_NAMES[index % 7]
    return latin if english else persian


def to_persian_digits(text: str) -> str:
    """Replace Latin digits with Persian digits."""
    return text.translate(_TO_PERSIAN)


def to_latin_digits(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with Latin digits."""
    return text.translate(_TO_LATIN)
