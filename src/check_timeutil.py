# -*- coding: utf-8 -*-
import datetime
import pytz

DEFAULT_TZ = "Asia/Seoul"

def zone(name: str = DEFAULT_TZ):
    """타임존 이름 → pytz tzinfo. 알 수 없는 이름이면 UnknownTimeZoneError."""
    return pytz.timezone(name or DEFAULT_TZ)

def now_in(name: str = DEFAULT_TZ) -> datetime.datetime:
    return datetime.datetime.now(tz=zone(name))

def iso_stamp(dt: datetime.datetime = None, tz_name: str = DEFAULT_TZ) -> str:
    # 리포트 기록용(초 단위) ISO-8601
    if dt is None:
        dt = now_in(tz_name)
    if dt.tzinfo is None:
        # 타임존이 없으면 UTC로 가정
        dt = pytz.UTC.localize(dt)
    return dt.astimezone(zone(tz_name)).isoformat(timespec="seconds")
