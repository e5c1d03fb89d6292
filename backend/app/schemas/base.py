"""Schema 基类"""
from datetime import datetime, timezone
from typing import Annotated
from pydantic import BaseModel, ConfigDict, AfterValidator
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    """数据库中的时间均为 UTC，输出时补上时区"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# 输出为 ISO 8601（带 Z 后缀）
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """对外字段使用 camelCase，同时接受 snake_case"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
