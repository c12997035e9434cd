"""Parsing of upstream duration strings such as ``00d01:23:00``."""

MINUTES_PER_DAY = 24 * 60


def _parse_number(text: str) -> int | None:
    """Parse a plain run of ASCII digits; signs, spaces and underscores are rejected."""
    if not text or not text.isascii() or not text.isdigit():
        return None
    return int(text)


def _parse_clock(text: str) -> int | None:
    parts = text.split(":")
    if len(parts) != 3:
        return None
    hours = _parse_number(parts[0])
    minutes = _parse_number(parts[1])
    if hours is None or minutes is None:
        return None
    return hours * 60 + minutes


def parse_duration_minutes(text: str | None, include_days: bool = True) -> int | None:
    """Convert a ``[Dd]HH:MM:SS`` duration to whole minutes.

    Seconds are ignored. With ``include_days`` the day count before the ``d``
    is added as full days; without it only the part after the last ``d`` is
    used, so ``"2d01:23:00"`` gives 83 like ``"01:23:00"`` does.

    Returns None if the text is malformed.
    """
    if not text:
        return None

    if not include_days:
        return _parse_clock(text.split("d")[-1])

    days_text, sep, clock_text = text.partition("d")
    if not sep:
        return _parse_clock(text)

    clock_minutes = _parse_clock(clock_text)
    days = _parse_number(days_text)
    if clock_minutes is None or days is None:
        return None
    return days * MINUTES_PER_DAY + clock_minutes
