"""Pure calendar date helpers - no I/O dependencies.

All values are ``datetime.date``: there is no time component, so day
offsets are exact and never shifted by daylight-saving transitions.
"""

import re
from datetime import date, timedelta
from types import MappingProxyType

from .errors import InvalidDateError, InvalidWeekdayError

# Letter -> weekday index with Sunday = 0 (H = Thursday, U = Sunday)
WEEKDAY_LETTERS = MappingProxyType({"U": 0, "M": 1, "T": 2, "W": 3, "H": 4, "F": 5, "S": 6})

# Display order for prompts (Monday first)
WEEKDAY_ORDER = ("M", "T", "W", "H", "F", "S", "U")

WEEKDAY_NAMES = MappingProxyType(
    {"M": "Mon", "T": "Tue", "W": "Wed", "H": "Thu", "F": "Fri", "S": "Sat", "U": "Sun"}
)

_INDEX_TO_LETTER = {index: letter for letter, index in WEEKDAY_LETTERS.items()}

_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")


def today() -> date:
    """Today's local calendar date."""
    return date.today()


def format_date(d: date) -> str:
    """Render a date as YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def add_days(d: date, n: int) -> date:
    """Offset a date by n days (n may be negative)."""
    return d + timedelta(days=n)


def parse_loose_date(text: str) -> date:
    """
    Parse YYYY-MM-DD or YYYY/MM/DD into a date.

    Whitespace is trimmed and slashes are normalized to hyphens first.
    Raises InvalidDateError if the text is not a real calendar date.
    """
    norm = str(text).strip().replace("/", "-")
    match = _DATE_PATTERN.match(norm)
    if not match:
        raise InvalidDateError(f"Invalid date: {text!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(f"Invalid date: {text!r}") from None


def weekday_index(d: date) -> int:
    """Weekday index with Sunday = 0 .. Saturday = 6."""
    return d.isoweekday() % 7


def weekday_letter(d: date) -> str:
    """The weekday letter for a date."""
    return _INDEX_TO_LETTER[weekday_index(d)]


def parse_weekday_letters(text: str) -> frozenset[str]:
    """
    Parse a weekday selection like "MWF", "M,W,F" or "m w f".

    Returns a (possibly empty) frozenset of letters.
    Raises InvalidWeekdayError on any letter outside the alphabet.
    """
    letters = [c.upper() for c in text if not c.isspace() and c != ","]
    unknown = [c for c in letters if c not in WEEKDAY_LETTERS]
    if unknown:
        raise InvalidWeekdayError(
            f"Unknown weekday letter(s) {''.join(unknown)!r} in {text!r} "
            f"(use {' '.join(WEEKDAY_ORDER)})"
        )
    return frozenset(letters)
