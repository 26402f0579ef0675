"""
Finish-time helpers.

Times are stored as "MM:SS.ms" strings: minutes zero-padded to at least two
digits, seconds 00-59, hundredths 00-99. Sorting always goes through
parse_time() because the string order breaks once minutes pass 99.
"""
import re
from typing import NamedTuple, Optional

from django.core.exceptions import ValidationError

MAX_MINUTES = 9999
MAX_SECONDS = 59
MAX_HUNDREDTHS = 99

# optional hour section, as some stores render intervals as H:MM:SS.ms
_TIME_RE = re.compile(r"^(?:(\d+):)?(\d+):(\d{2})\.(\d{2})$")


class FinishTime(NamedTuple):
    minutes: int
    seconds: int
    hundredths: int

    @property
    def total_hundredths(self) -> int:
        return (self.minutes * 60 + self.seconds) * 100 + self.hundredths

    def __str__(self) -> str:
        return format_time(self.minutes, self.seconds, self.hundredths)


def format_time(minutes: int, seconds: int, hundredths: int) -> str:
    return f"{minutes:02d}:{seconds:02d}.{hundredths:02d}"


def parse_time(value: str) -> FinishTime:
    """Parse "MM:SS.ms" (or "H:MM:SS.ms") into a FinishTime. Raises ValueError."""
    match = _TIME_RE.match((value or "").strip())
    if not match:
        raise ValueError(f"Malformed finish time: {value!r}")
    hours, minutes, seconds, hundredths = match.groups()
    seconds = int(seconds)
    if seconds > MAX_SECONDS:
        raise ValueError(f"Seconds out of range in {value!r}")
    minutes = int(minutes) + int(hours or 0) * 60
    return FinishTime(minutes, seconds, int(hundredths))


def display_time(value: str) -> str:
    """Render a stored time as MM:SS.ms, folding any hour section into minutes."""
    try:
        return str(parse_time(value))
    except ValueError:
        return value


def coerce_component(field: str, value, upper: Optional[int] = None) -> int:
    """
    Turn one free-typed time field into an int.

    Accepts ints and digit strings. Anything negative, above `upper`,
    fractional or non-numeric is rejected rather than clamped.
    """
    if isinstance(value, bool):
        raise ValidationError({field: "Must be a whole number."})
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise ValidationError({field: "Must be a whole number."})
        number = int(text)
    elif isinstance(value, int):
        number = value
    else:
        raise ValidationError({field: "Must be a whole number."})

    if number < 0:
        raise ValidationError({field: "Must not be negative."})
    if upper is not None and number > upper:
        raise ValidationError({field: f"Must be between 0 and {upper}."})
    return number


def finish_time_from_parts(minutes, seconds, milliseconds) -> FinishTime:
    """Validate the three entry fields together; all problems are reported at once."""
    errors = {}
    parts = {}
    for field, value, upper in (
        ('minutes', minutes, MAX_MINUTES),
        ('seconds', seconds, MAX_SECONDS),
        ('milliseconds', milliseconds, MAX_HUNDREDTHS),
    ):
        try:
            parts[field] = coerce_component(field, value, upper)
        except ValidationError as exc:
            errors.update(exc.message_dict)
    if errors:
        raise ValidationError(errors)
    return FinishTime(parts['minutes'], parts['seconds'], parts['milliseconds'])
