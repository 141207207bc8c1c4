"""Validators for plain string fields.

Lengths are counted in Unicode code points. Values that are not strings
pass; the build reports them as InvalidValue.
"""

import re
from datetime import date, time

from blockkit.core.validators._base import predicate_validator
from blockkit.core.value import Validator
from blockkit.errors import InvalidFormat, MaxTextLength, MinTextLength

DATE_FORMAT = "YYYY-MM-DD"
TIME_FORMAT = "24-hour format HH:mm"

_DATE_PATTERN = re.compile(r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})")
_TIME_PATTERN = re.compile(r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})")


def max_length(limit: int) -> Validator:
    def exceeds(v) -> bool:
        return isinstance(v, str) and len(v) > limit

    return predicate_validator(MaxTextLength(limit), exceeds, f"max_{limit}")


def min_length(limit: int) -> Validator:
    def too_short(v) -> bool:
        return isinstance(v, str) and len(v) < limit

    return predicate_validator(MinTextLength(limit), too_short, f"min_{limit}")


def _is_invalid_date(text: str) -> bool:
    if not isinstance(text, str):
        return False
    match = _DATE_PATTERN.fullmatch(text)
    if match is None:
        return True
    try:
        date(int(match["year"]), int(match["month"]), int(match["day"]))
    except ValueError:
        return True
    return False


def _is_invalid_time(text: str) -> bool:
    if not isinstance(text, str):
        return False
    match = _TIME_PATTERN.fullmatch(text)
    if match is None:
        return True
    try:
        time(int(match["hour"]), int(match["minute"]))
    except ValueError:
        return True
    return False


max_50 = max_length(50)
max_75 = max_length(75)
max_150 = max_length(150)
max_255 = max_length(255)
max_2000 = max_length(2000)
max_3000 = max_length(3000)
max_12000 = max_length(12000)

min_1 = min_length(1)

date_format = predicate_validator(
    InvalidFormat(DATE_FORMAT), _is_invalid_date, "date_format"
)
time_format = predicate_validator(
    InvalidFormat(TIME_FORMAT), _is_invalid_time, "time_format"
)
