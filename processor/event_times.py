"""Timestamp and duration handling for frab events."""
import re
from datetime import datetime, timedelta

from processor.errors import MalformedDuration, MalformedTimestamp

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S%z'

_TIMESTAMP_PATTERN = re.compile(
    r'[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}[+-][0-9]{2}:[0-9]{2}'
)
_DURATION_PART_PATTERN = re.compile(r'[0-9]+')


def parse_timestamp(value: str) -> datetime:
    """
    Parse a timestamp of the form YYYY-MM-DDThh:mm:ss+hh:mm.

    Args:
        value: Timestamp string with a numeric UTC offset

    Returns:
        Timezone-aware datetime

    Raises:
        MalformedTimestamp: If the string is not in the expected format
    """
    if not isinstance(value, str) or not _TIMESTAMP_PATTERN.fullmatch(value):
        raise MalformedTimestamp(f"Unable to parse timestamp {value!r}")

    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise MalformedTimestamp(
            f"Unable to parse timestamp {value!r}: {e}"
        ) from e


def format_timestamp(moment: datetime) -> str:
    """Format an aware datetime as YYYY-MM-DDThh:mm:ss+hh:mm."""
    return moment.replace(microsecond=0).isoformat()


def parse_duration(value: str) -> timedelta:
    """
    Parse an H:MM or HH:MM duration.

    Args:
        value: Hours and minutes separated by a single colon

    Returns:
        Duration as a timedelta

    Raises:
        MalformedDuration: If the string is not exactly two integer parts
    """
    parts = value.split(':') if isinstance(value, str) else []
    if len(parts) != 2:
        raise MalformedDuration(f"Unable to parse duration {value!r}")

    hours, minutes = parts
    if not (_DURATION_PART_PATTERN.fullmatch(hours) and
            _DURATION_PART_PATTERN.fullmatch(minutes)):
        raise MalformedDuration(f"Unable to parse duration {value!r}")

    try:
        return timedelta(hours=int(hours), minutes=int(minutes))
    except OverflowError as e:
        raise MalformedDuration(f"Duration {value!r} is out of range") from e


def compute_end(date: str, duration: str) -> str:
    """
    Compute an event's end timestamp from its start and duration.

    The result keeps the start's UTC offset; no timezone conversion is
    applied.

    Args:
        date: Start timestamp (YYYY-MM-DDThh:mm:ss+hh:mm)
        duration: H:MM duration string

    Returns:
        End timestamp in the same format as the start

    Raises:
        MalformedTimestamp: If the start cannot be parsed
        MalformedDuration: If the duration cannot be parsed or pushes the
            end past the last representable date
    """
    start = parse_timestamp(date)
    try:
        end = start + parse_duration(duration)
    except OverflowError as e:
        raise MalformedDuration(
            f"Duration {duration!r} from {date!r} ends out of range"
        ) from e
    return format_timestamp(end)


def current_timestamp() -> str:
    """Return the local time with its UTC offset, in timestamp format."""
    return format_timestamp(datetime.now().astimezone())
