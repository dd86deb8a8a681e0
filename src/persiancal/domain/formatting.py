"""Layout-based formatting and parsing of Jalali dates.

Layout tokens (longest match wins, everything else is literal):

==========  ==========================================
``yyyy``    4-digit year (``1404``)
``yy``      2-digit year (``04``); parsed as ``1300 + yy``
``MMMM``    Persian month name (``آبان``)
``MMM``     English month name (``Aban``)
``MM``      2-digit month (``08``)
``M``       month without padding (``8``)
``dd``      2-digit day (``04``)
``d``       day without padding (``4``)
==========  ==========================================
"""

from __future__ import annotations

import datetime
import re

from persiancal.domain.date import JalaliDate
from persiancal.domain.errors import ParseError
from persiancal.domain.locale import (
    MONTH_NAMES,
    month_from_english_name,
    month_from_persian_name,
    month_name_english,
    month_name_persian,
    to_latin_digits,
    to_persian_digits,
)

LAYOUT_ISO = "yyyy-MM-dd"
LAYOUT_SLASH = "yyyy/MM/dd"
LAYOUT_DOT = "yyyy.MM.dd"
LAYOUT_LONG = "dd MMMM yyyy"
LAYOUT_LONG_ENGLISH = "dd MMM yyyy"
LAYOUT_SHORT = "yy/MM/dd"

TWO_DIGIT_YEAR_BASE = 1300

_TOKEN_RE = re.compile(r"yyyy|yy|MMMM|MMM|MM|M|dd|d")

# Fixed-width numeric tokens; ``M`` and ``d`` take one or two digits.
_NUMERIC_PATTERNS: dict[str, re.Pattern[str]] = {
    "yyyy": re.compile(r"[0-9]{4}"),
    "yy": re.compile(r"[0-9]{2}"),
    "MM": re.compile(r"[0-9]{2}"),
    "M": re.compile(r"[0-9]{1,2}"),
    "dd": re.compile(r"[0-9]{2}"),
    "d": re.compile(r"[0-9]{1,2}"),
}

_PERSIAN_NAME_LENGTHS = sorted({len(persian) for persian, _ in MONTH_NAMES}, reverse=True)
_ENGLISH_NAME_LENGTHS = sorted({len(english) for _, english in MONTH_NAMES}, reverse=True)

_JALALI_INPUT_RE = re.compile(r"^(-?[0-9]+)([-/.])([0-9]{1,2})\2([0-9]{1,2})$")
_GREGORIAN_YMD_RE = re.compile(r"^([0-9]{4})([-/.])([0-9]{1,2})\2([0-9]{1,2})$")
_GREGORIAN_DMY_RE = re.compile(r"^([0-9]{1,2})([-/.])([0-9]{1,2})\2([0-9]{4})$")


def _tokenize(layout: str) -> list[tuple[bool, str]]:
    """Split *layout* into ``(is_token, text)`` pieces."""
    pieces: list[tuple[bool, str]] = []
    pos = 0
    for match in _TOKEN_RE.finditer(layout):
        if match.start() > pos:
            pieces.append((False, layout[pos : match.start()]))
        pieces.append((True, match.group()))
        pos = match.end()
    if pos < len(layout):
        pieces.append((False, layout[pos:]))
    return pieces


def _render_token(token: str, date: JalaliDate) -> str:
    if token == "yyyy":
        return f"{date.year:04d}"
    if token == "yy":
        return f"{date.year % 100:02d}"
    if token == "MMMM":
        return month_name_persian(date.month)
    if token == "MMM":
        return month_name_english(date.month)
    if token == "MM":
        return f"{date.month:02d}"
    if token == "M":
        return str(date.month)
    if token == "dd":
        return f"{date.day:02d}"
    return str(date.day)


def format_date(date: JalaliDate, layout: str = LAYOUT_ISO, *, persian_digits: bool = False) -> str:
    """Render *date* according to *layout*.

    Month names are substituted as whole tokens, so letters inside a
    rendered name are never re-interpreted as layout tokens.
    """
    text = _TOKEN_RE.sub(lambda m: _render_token(m.group(), date), layout)
    return to_persian_digits(text) if persian_digits else text


def _match_month_name(text: str, pos: int, *, english: bool) -> tuple[int, int]:
    """Match a month name at *pos*; return ``(month, new_pos)``."""
    lookup = month_from_english_name if english else month_from_persian_name
    # Longest names first so a shorter name never shadows a longer one.
    for length in _ENGLISH_NAME_LENGTHS if english else _PERSIAN_NAME_LENGTHS:
        chunk = text[pos : pos + length]
        # The lookups strip whitespace, which must not be consumed here.
        if len(chunk) != length or chunk != chunk.strip():
            continue
        month = lookup(chunk)
        if month:
            return month, pos + length
    language = "English" if english else "Persian"
    raise ParseError(f"could not match {language} month name at position {pos}")


def parse_date(layout: str, value: str) -> JalaliDate:
    """Parse *value* against *layout*.

    Persian and Arabic-Indic digits are accepted.  The layout must contain a
    year, a month and a day token.

    Raises:
        ParseError: *value* does not match *layout*.
        InvalidDateError: the parsed fields do not form a valid date.
    """
    text = to_latin_digits(value)
    fields: dict[str, int] = {}
    pos = 0

    for is_token, piece in _tokenize(layout):
        if not is_token:
            if not text.startswith(piece, pos):
                got = text[pos : pos + len(piece)]
                raise ParseError(f"expected {piece!r} at position {pos} but got {got!r}")
            pos += len(piece)
            continue

        if piece in ("MMMM", "MMM"):
            fields["month"], pos = _match_month_name(text, pos, english=piece == "MMM")
            continue

        match = _NUMERIC_PATTERNS[piece].match(text, pos)
        if match is None:
            raise ParseError(f"expected digits for token {piece!r} at position {pos}")
        number = int(match.group())
        pos = match.end()
        if piece == "yyyy":
            fields["year"] = number
        elif piece == "yy":
            fields["year"] = TWO_DIGIT_YEAR_BASE + number
        elif piece in ("MM", "M"):
            fields["month"] = number
        else:
            fields["day"] = number

    if pos < len(text):
        raise ParseError(f"unexpected trailing input {text[pos:]!r}")
    missing = [name for name in ("year", "month", "day") if name not in fields]
    if missing:
        raise ParseError(f"layout {layout!r} has no token for: {', '.join(missing)}")

    return JalaliDate(fields["year"], fields["month"], fields["day"])


def parse_jalali_input(text: str) -> JalaliDate:
    """Read a loosely formatted Jalali date: ``y-m-d``, ``y/m/d`` or ``y.m.d``.

    Raises:
        ParseError: unsupported shape.
        InvalidDateError: the fields do not form a valid date.
    """
    cleaned = to_latin_digits(text).strip()
    match = _JALALI_INPUT_RE.match(cleaned)
    if match is None:
        raise ParseError(f"unsupported date format: {text}")
    return JalaliDate(int(match.group(1)), int(match.group(3)), int(match.group(4)))


def parse_gregorian_input(text: str) -> datetime.date:
    """Read a loosely formatted Gregorian date in ``y-m-d`` or ``d-m-y`` order.

    Separators may be ``-``, ``/`` or ``.``.
    """
    cleaned = to_latin_digits(text).strip()
    ymd = _GREGORIAN_YMD_RE.match(cleaned)
    dmy = _GREGORIAN_DMY_RE.match(cleaned)
    if ymd is not None:
        year, month, day = int(ymd.group(1)), int(ymd.group(3)), int(ymd.group(4))
    elif dmy is not None:
        day, month, year = int(dmy.group(1)), int(dmy.group(3)), int(dmy.group(4))
    else:
        raise ParseError(f"unsupported date format: {text}")
    try:
        return datetime.date(year, month, day)
    except ValueError as exc:
        raise ParseError(f"invalid Gregorian date {text}: {exc}") from exc
