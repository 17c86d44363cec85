"""Resolve the date keyword and hour range given on the command line.

The clock is passed in as a zero-argument callable (defaults to
datetime.now) so callers and tests can pin "now". All datetimes are naive
local time.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta

from errors import InvalidIntegerError, InvalidTimeFormatError, UnknownDateFormatError

log = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"

# ASCII digits with an optional sign; no whitespace or underscores
_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class TimeOffset:
    begin: timedelta    # relay on, from midnight
    end: timedelta      # relay off, from midnight; not required to be > begin


def parse_ints(text, sep):
    """Split text on sep and convert each piece to int, skipping empty pieces."""
    values = []
    for token in text.split(sep):
        log.debug("Parsing string '%s' to integer", token)
        if token == "":
            continue
        if not _INT_RE.fullmatch(token):
            raise InvalidIntegerError(f"invalid integer value: {token}")
        values.append(int(token))
    return values


def truncate_to_day(dt):
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def today(now=datetime.now):
    return truncate_to_day(now())


def tomorrow(now=datetime.now):
    return today(now) + timedelta(days=1)


def parse_date(text, now=datetime.now):
    """Resolve 'today' or 'tomorrow' to local midnight of that day."""
    if text == "today":
        return today(now)
    if text == "tomorrow":
        return tomorrow(now)
    raise UnknownDateFormatError(f"unknown date format: {text}")


def describe_date(date, now=datetime.now):
    """Format a resolved date for logging, e.g. '2024-01-15 (today)'."""
    label = date.strftime(DATE_FORMAT)
    if date == today(now):
        label += " (today)"
    elif date == tomorrow(now):
        label += " (tomorrow)"
    return label


def parse_time(text):
    """Parse '<hour_start>..<hour_end>' into a TimeOffset.

    Hours are not range-checked: negative values or values past 23 move the
    switch time into the previous or next day.
    """
    try:
        hours = parse_ints(text, "..")
    except InvalidIntegerError as e:
        raise InvalidTimeFormatError(f"incorrect time format: <hour_start>..<hour_end> ({e})") from e
    if len(hours) != 2:
        raise InvalidTimeFormatError("incorrect time format: <hour_start>..<hour_end>")
    return TimeOffset(timedelta(hours=hours[0]), timedelta(hours=hours[1]))
