from pydantic import BaseModel, Field as PydField


class TimezoneInfoOut(BaseModel):
    timezone: str = PydField(..., examples=["America/Los_Angeles"])
    current_utc_time: str = PydField(..., examples=["2024-01-08 03:15:00"])
    current_local_time: str = PydField(..., examples=["2024-01-07 19:15:00"])
    timezone_offset: str = PydField(..., examples=["-08:00"])


class TimezoneDebugOut(TimezoneInfoOut):
    server_local_time: str
    week_date: str
    day_of_week: str
