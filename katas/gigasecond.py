"""Add a gigasecond to a moment in time."""

from __future__ import annotations

from datetime import datetime, timedelta

GIGASECOND = timedelta(seconds=1_000_000_000)


def after(start: datetime) -> datetime:
    """Return ``start`` plus one billion seconds, saturating at the latest representable moment."""
    try:
        return start + GIGASECOND
    except OverflowError:
        return datetime.max.replace(tzinfo=start.tzinfo)