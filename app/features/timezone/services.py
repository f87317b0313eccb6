from datetime import datetime, timezone, tzinfo

from app.features.timezone.schemas import TimezoneDebugOut, TimezoneInfoOut
from app.utils.weeks import DATETIME_FORMAT, day_name, format_offset, timezone_name, week_date


class TimezoneService:
    """Lecture seule : expose le fuseau configuré et l'heure courante. Aucune persistance."""

    def __init__(self, tz: tzinfo):
        self.tz = tz

    @staticmethod
    def _aware(now: datetime) -> datetime:
        return now.replace(tzinfo=timezone.utc) if now.tzinfo is None else now

    def info(self, now: datetime) -> TimezoneInfoOut:
        now = self._aware(now)
        local = now.astimezone(self.tz)
        return TimezoneInfoOut(
            timezone=timezone_name(self.tz),
            current_utc_time=now.astimezone(timezone.utc).strftime(DATETIME_FORMAT),
            current_local_time=local.strftime(DATETIME_FORMAT),
            timezone_offset=format_offset(local),
        )

    def debug(self, now: datetime) -> TimezoneDebugOut:
        now = self._aware(now)
        base = self.info(now)
        return TimezoneDebugOut(
            **base.model_dump(),
            server_local_time=now.astimezone().strftime(DATETIME_FORMAT),
            week_date=week_date(now, self.tz),
            day_of_week=day_name(now, self.tz),
        )
