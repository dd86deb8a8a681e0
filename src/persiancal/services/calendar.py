"""CalendarService — the operations behind ``now``, ``convert`` and ``diff``.

Every public method returns a :class:`ServiceResult`.  Domain exceptions
raised while reading user input are turned into a failed result carrying
the exception's ``code``; nothing here raises for bad input.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any

import structlog

from persiancal.config.models import GREGORIAN_ISO_LAYOUT
from persiancal.domain.date import JalaliDate, months_between, years_between
from persiancal.domain.errors import PersianCalError
from persiancal.domain.formatting import (
    format_date,
    parse_gregorian_input,
    parse_jalali_input,
)
from persiancal.domain.locale import to_persian_digits, weekday_name
from persiancal.services.result import ServiceError, ServiceResult
from persiancal.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from persiancal.config.settings import PersianCalSettings

log = structlog.get_logger(__name__)


def _now() -> datetime.datetime:
    """Local wall-clock time; the single source of "now"."""
    return datetime.datetime.now()


def _failure(op: str, exc: PersianCalError, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=detail),
    )


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _join_parts(parts: list[str]) -> str:
    """``["a"]`` -> ``a``; ``["a", "b", "c"]`` -> ``a, b and c``."""
    if len(parts) == 1:
        return parts[0]
    return f"{', '.join(parts[:-1])} and {parts[-1]}"


def breakdown(start: JalaliDate, end: JalaliDate) -> tuple[int, int, int]:
    """Split the span ``start..end`` (start not after end) into years, months, days.

    Whole years come first, then whole months from the shifted start, then
    the remaining days.
    """
    years = years_between(start, end)
    cursor = start.add_years(years)
    months = months_between(cursor, end)
    cursor = cursor.add_months(months)
    return years, months, end.days_between(cursor)


def describe_breakdown(years: int, months: int, days: int) -> str:
    """Human text such as ``1 year, 2 months and 3 days``."""
    parts: list[str] = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    if days > 0 or not parts:
        parts.append(_plural(days, "day"))
    return _join_parts(parts)


class CalendarService:
    """Calendar operations configured by :class:`PersianCalSettings`."""

    def __init__(self, settings: PersianCalSettings) -> None:
        self._settings = settings

    @property
    def _persian(self) -> bool:
        return self._settings.use_persian_digits

    def _digits(self, text: str) -> str:
        return to_persian_digits(text) if self._persian else text

    @staticmethod
    def _date_fields(date: JalaliDate) -> dict[str, Any]:
        return {
            "year": date.year,
            "month": date.month,
            "day": date.day,
            "month_name": date.month_name(),
            "month_name_english": date.month_name_english(),
            "weekday": weekday_name(date.weekday()),
            "day_of_year": date.day_of_year(),
            "is_leap": date.is_leap(),
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def now(
        self,
        *,
        layout: str | None = None,
        long: bool = False,
        english: bool = False,
        show_time: bool = False,
    ) -> ServiceResult:
        """Today's Jalali date.

        *layout* wins over *long*; *english* picks English month names for
        the long layout and then keeps Latin digits.
        """
        op = "now"
        display = self._settings.display
        moment = _now()
        today = JalaliDate.from_date(moment.date())

        persian = self._persian
        if layout:
            chosen = layout
        elif long:
            chosen = display.long_layout_english if english else display.long_layout
            persian = persian and not english
        else:
            chosen = display.layout

        formatted = format_date(today, chosen, persian_digits=persian)
        if show_time:
            clock = moment.strftime(display.time_layout)
            formatted = f"{formatted} {to_persian_digits(clock) if persian else clock}"

        log.debug("calendar.now", date=str(today), layout=chosen)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "formatted": formatted,
                "date": str(today),
                "gregorian": moment.date().isoformat(),
                **self._date_fields(today),
            },
        )

    @traced
    def convert(self, text: str, *, reverse: bool = False, layout: str | None = None) -> ServiceResult:
        """Convert Gregorian *text* to Jalali, or Jalali to Gregorian with *reverse*."""
        op = "convert"
        target = "gregorian" if reverse else "jalali"
        try:
            with trace_span("parse_input") as span:
                if span is not None:
                    span.annotate("target", target)
                if reverse:
                    jalali = parse_jalali_input(text)
                    gregorian = jalali.to_date()
                else:
                    gregorian = parse_gregorian_input(text)
                    jalali = JalaliDate.from_date(gregorian)
        except PersianCalError as exc:
            log.debug("calendar.convert.rejected", input=text, code=exc.code)
            return _failure(op, exc, input=text)
        except ValueError as exc:
            # Jalali dates whose Gregorian image is outside datetime's range.
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="OUT_OF_RANGE", message=str(exc), detail={"input": text}),
            )

        with trace_span("format_output") as span:
            if reverse:
                chosen = layout or self._settings.display.gregorian_layout
                # strftime("%Y") does not zero-pad years below 1000 on glibc.
                if chosen == GREGORIAN_ISO_LAYOUT:
                    text_out = gregorian.isoformat()
                else:
                    text_out = gregorian.strftime(chosen)
                formatted = self._digits(text_out)
            else:
                chosen = layout or self._settings.display.layout
                formatted = format_date(jalali, chosen, persian_digits=self._persian)
            if span is not None:
                span.annotate("layout", chosen)

        log.debug("calendar.convert", input=text, target=target, result=formatted)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "formatted": formatted,
                "target": target,
                "jalali": str(jalali),
                "gregorian": gregorian.isoformat(),
                **self._date_fields(jalali),
            },
        )

    @traced
    def diff(
        self,
        first: str,
        second: str,
        *,
        breakdown_parts: bool | None = None,
        days_only: bool = False,
    ) -> ServiceResult:
        """Distance between two Jalali dates given as text.

        ``days`` is signed (``second - first``); the rendered text uses the
        absolute value.
        """
        op = "diff"
        try:
            start = parse_jalali_input(first)
        except PersianCalError as exc:
            return _failure(op, exc, input=first, position="first")
        try:
            end = parse_jalali_input(second)
        except PersianCalError as exc:
            return _failure(op, exc, input=second, position="second")

        days = end.days_between(start)
        total = abs(days)
        total_text = self._digits(_plural(total, "day"))
        data: dict[str, Any] = {
            "from": str(start),
            "to": str(end),
            "days": days,
            "total_days": total,
        }

        if days_only:
            data["formatted"] = self._digits(str(total))
        else:
            data["formatted"] = total_text

        want_breakdown = self._settings.diff.breakdown if breakdown_parts is None else breakdown_parts
        if want_breakdown and not days_only:
            earlier, later = (start, end) if days >= 0 else (end, start)
            years, months, rest = breakdown(earlier, later)
            data["breakdown"] = {"years": years, "months": months, "days": rest}
            data["formatted"] = self._digits(describe_breakdown(years, months, rest))
            data["total"] = total_text

        warnings: list[str] = []
        if days < 0:
            warnings.append(f"{end} is before {start}; showing the absolute distance")

        log.debug("calendar.diff", start=str(start), end=str(end), days=days)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
