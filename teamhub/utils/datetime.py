"""Timestamps expressed in the configured application timezone.

Database columns store naive datetimes in that timezone; domain entities
carry aware ones.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from teamhub.config import get_settings


def _parse_utc_offset(name: str) -> tzinfo | None:
    """Return a fixed offset for names like ``UTC-05:00`` or ``GMT+7``."""

    prefix, rest = name[:3].upper(), name[3:]
    if prefix not in ("UTC", "GMT") or rest[:1] not in ("+", "-"):
        return None
    hours, _, minutes = rest[1:].partition(":")
    if not hours.isdigit() or (minutes and not minutes.isdigit()):
        return None
    offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
    return timezone(-offset if rest[0] == "-" else offset)


@lru_cache(maxsize=1)
def _app_timezone() -> tzinfo:
    name = (get_settings().app_timezone or "").strip()
    if not name:
        return timezone.utc
    fixed = _parse_utc_offset(name)
    if fixed is not None:
        return fixed
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current time in the app timezone, ready for a naive DB column."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach the app timezone to naive values and convert aware ones."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=_app_timezone())
    return value.astimezone(_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    localized = ensure_app_timezone(value)
    return None if localized is None else localized.replace(tzinfo=None)
