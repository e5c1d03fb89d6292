"""时间工具（数据库统一存储不带时区的 UTC 时间）"""
from datetime import datetime, date, timedelta, timezone
from typing import Optional, Tuple


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """转换为不带时区的 UTC 时间；无时区的输入按 UTC 处理"""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def utc_day_bounds(day: date) -> Tuple[datetime, datetime]:
    """某个 UTC 日期的 [00:00, 次日 00:00) 区间"""
    start = datetime(day.year, day.month, day.day)
    return start, start + timedelta(days=1)
