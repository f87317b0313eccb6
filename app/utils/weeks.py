"""
➡️ But : Découper le temps en "semaines" (dimanche → samedi) dans un fuseau horaire fixe.

week_start() : dimanche le plus récent (inclus) pour un instant donné.
day_name()   : nom du jour en anglais, en minuscules ("monday").

Le fuseau est chargé une fois au démarrage (load_timezone) puis injecté partout.
"""

import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Indexé par date.weekday() (lundi = 0) ; indépendant de la locale du process
DAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

Instant = Union[datetime, date]


def load_timezone(name: str) -> tzinfo:
    """Résout un identifiant IANA ; UTC si indisponible."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Failed to load timezone %r, using UTC: %s", name, e)
        return timezone.utc


def timezone_name(tz: tzinfo) -> str:
    return getattr(tz, "key", None) or str(tz)


def local_date(instant: Instant, tz: tzinfo) -> date:
    """Date calendaire de `instant` dans `tz`. Un datetime naïf est lu comme UTC."""
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(tz).date()
    return instant


def week_start(instant: Instant, tz: tzinfo) -> date:
    d = local_date(instant, tz)
    # dimanche = 0
    days_since_sunday = (d.weekday() + 1) % 7
    return d - timedelta(days=days_since_sunday)


def week_date(instant: Instant, tz: tzinfo) -> str:
    """Clé de semaine au format YYYY-MM-DD."""
    return week_start(instant, tz).isoformat()


def day_name(instant: Instant, tz: tzinfo) -> str:
    return DAY_NAMES[local_date(instant, tz).weekday()]


def format_offset(dt: datetime) -> str:
    """Décalage UTC d'un datetime aware, au format ±HH:MM."""
    offset = dt.utcoffset() or timedelta(0)
    total_minutes = int(offset.total_seconds()) // 60
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
