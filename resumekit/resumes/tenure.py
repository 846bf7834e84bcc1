"""
Date parsing and tenure calculation

Dates in resumes come as ``03/2021``, ``March 2021``, ``Mar. 2021`` or a bare
``2021``. Everything resolves to the first day of the month; anything else is
``None`` ("unknown"), never a fallback epoch.
"""
from datetime import date, MINYEAR
from typing import Iterable, Optional

from resumekit.resumes.patterns import (
    BARE_YEAR,
    MONTHS,
    NAMED_MONTH_YEAR,
    NUMERIC_MONTH_YEAR,
    PART_TIME,
    PRESENT_WORDS,
)
from resumekit.resumes.schemas import PRESENT, ExperienceEntry

DAYS_PER_YEAR = 365
PART_TIME_WEIGHT = 0.5


def is_present(value: Optional[str]) -> bool:
    """True for the open-ended end-date sentinels (Present, Current, ...)"""
    return bool(value) and value.strip().lower() in PRESENT_WORDS


def normalize_end_label(value: Optional[str]) -> str:
    """Collapse every present-synonym to the canonical ``Present`` sentinel"""
    value = (value or "").strip()
    if is_present(value):
        return PRESENT
    return value


def _month_start(year: int, month: int) -> Optional[date]:
    if year < MINYEAR or not 1 <= month <= 12:
        return None
    return date(year, month, 1)


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse MM/YYYY, <Month> YYYY or YYYY; None when nothing matches"""
    if not value:
        return None

    match = NUMERIC_MONTH_YEAR.search(value)
    if match:
        parsed = _month_start(int(match.group(2)), int(match.group(1)))
        if parsed:
            return parsed

    match = NAMED_MONTH_YEAR.search(value)
    if match:
        month = MONTHS.get(match.group(1)[:3].lower())
        if month:
            return _month_start(int(match.group(2)), month)

    match = BARE_YEAR.search(value)
    if match:
        return _month_start(int(match.group(1)), 1)

    return None


def resolve_end(value: Optional[str], now: date) -> Optional[date]:
    if is_present(value):
        return now
    return parse_date(value)


def is_part_time(entry: ExperienceEntry) -> bool:
    """Part-time, internship, contract and similar roles (role or company text)"""
    return bool(PART_TIME.search(f"{entry.role} {entry.company}"))


def entry_years(entry: ExperienceEntry, now: Optional[date] = None) -> Optional[float]:
    """
    Raw fractional years covered by one entry, or None if either bound is unknown.

    An end before the start yields a negative value; flagging that is the
    validator's job.
    """
    now = now or date.today()
    start = parse_date(entry.start_date)
    end = resolve_end(entry.end_date, now)
    if start is None or end is None:
        return None
    return (end - start).days / DAYS_PER_YEAR


def compute_years(
    entries: Iterable[ExperienceEntry],
    now: Optional[date] = None,
    discount_part_time: bool = True,
) -> float:
    """Total tenure in years, part-time roles weighted at 50%, one decimal"""
    now = now or date.today()
    total = 0.0
    for entry in entries:
        years = entry_years(entry, now)
        if years is None:
            continue
        if discount_part_time and is_part_time(entry):
            years *= PART_TIME_WEIGHT
        total += years
    return round(total, 1)
