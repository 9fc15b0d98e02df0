from datetime import datetime, timezone

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def format_duration(seconds) -> str:
    """
    Format a signed number of seconds as ``H:MM:SS[.fraction]``.

    The sign is taken once from the input and the magnitude is broken down
    into components, so ``-125`` becomes ``-0:02:05`` rather than a mix of
    negative remainders. The fraction is the millisecond remainder with
    trailing zeros stripped and is left out entirely when it is zero.
    """
    # round() first so float noise such as 1000.9999999 lands on 1001 ms
    milliseconds = int(round(abs(seconds) * 1000, 3))
    total_seconds, remainder = divmod(milliseconds, 1000)
    total_minutes, secs = divmod(total_seconds, 60)
    hours, minutes = divmod(total_minutes, 60)

    sign = '-' if seconds < 0 and milliseconds else ''
    text = f"{sign}{hours}:{minutes:02d}:{secs:02d}"
    if remainder:
        text += '.' + f"{remainder:03d}".rstrip('0')
    return text


def format_timestamp(epoch) -> str:
    """Render Unix seconds as a UTC ISO-8601 string."""
    return datetime.fromtimestamp(epoch, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)
