# messenger/core/timeutil.py
import datetime as dt


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def iso_timestamp(moment: dt.datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision and a trailing Z, e.g. 2024-05-01T10:00:00.123Z"""
    moment = moment or utc_now()
    return moment.astimezone(dt.timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
