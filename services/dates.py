# services/dates.py
import re
from datetime import datetime, timedelta, timezone

_DIGITS = re.compile(r"\d+")
_CALENDAR_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000


class DateDecodeError(ValueError):
    pass


def decode_alc_date(value: str) -> str:
    """
    '/Date(1622255399000-0300)/' -> '2021-05-28T23:29:59.000Z'

    The offset is added to the epoch value, sign taken from any '-' in the
    string. This matches the upstream's published dates and must not be
    flipped.
    """
    groups = _DIGITS.findall(value or "")
    if len(groups) < 2:
        raise DateDecodeError(f"Invalid date format: {value!r}")

    sign = -1 if "-" in value else 1
    epoch_ms = int(groups[0])
    offset = groups[1]
    offset_ms = sign * (int(offset[:2]) * MS_PER_HOUR + int(offset[-2:]) * MS_PER_MINUTE)

    try:
        dt = EPOCH + timedelta(milliseconds=epoch_ms + offset_ms)
    except OverflowError:
        raise DateDecodeError(f"Date out of range: {value!r}") from None
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def to_calendar_date(value: str) -> str:
    """YYYY-MM-DD for either an upstream-encoded date or an already canonical one."""
    if _CALENDAR_DATE.fullmatch(value):
        return value
    return decode_alc_date(value)[:10]
