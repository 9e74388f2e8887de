from __future__ import annotations

from datetime import date, datetime
from typing import Iterator, Optional, Tuple

from policy_repro.core.errors import InvalidPeriodKeyError
from policy_repro.core.models import Policy

_FALLBACK_FORMATS = ("%Y-%m-%d", "%Y/%m/%d")


def split_period_key(key: str) -> Tuple[str, str]:
    """Split a "<start>.<end>" reform period key on its first dot."""
    start, sep, end = key.partition(".")
    if not sep:
        raise InvalidPeriodKeyError(key, "expected '<start>.<end>'")
    if not start or not end:
        raise InvalidPeriodKeyError(key, "empty start or end date")
    return start, end


def parse_calendar_date(value: str, *, key: Optional[str] = None) -> date:
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise InvalidPeriodKeyError(key or value, f"unparseable date {value!r}")


def iter_periods(policy: Policy) -> Iterator[Tuple[str, str, str, object]]:
    """Yield (parameter, start, end, value) in reform insertion order."""
    for parameter_name, periods in policy.reform.data.items():
        for key, value in periods.items():
            start, end = split_period_key(key)
            yield parameter_name, start, end, value


def get_start_end_dates(policy: Policy) -> dict:
    """
    Earliest start and latest end across every period of the reform.

    Comparison uses calendar dates, so "2019-6-1" sorts before "2019-06-02"
    even though it does not lexically. The original strings are returned.
    Both values are None for a reform without parameters.
    """
    earliest_start: Optional[str] = None
    latest_end: Optional[str] = None
    earliest_start_date: Optional[date] = None
    latest_end_date: Optional[date] = None

    for periods in policy.reform.data.values():
        for key in periods:
            start, end = split_period_key(key)
            start_date = parse_calendar_date(start, key=key)
            end_date = parse_calendar_date(end, key=key)
            if earliest_start_date is None or start_date < earliest_start_date:
                earliest_start, earliest_start_date = start, start_date
            if latest_end_date is None or end_date > latest_end_date:
                latest_end, latest_end_date = end, end_date

    return {"earliest_start": earliest_start, "latest_end": latest_end}
