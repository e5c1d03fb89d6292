"""工具函数"""
from .security import hash_password, verify_password, create_access_token, decode_token
from .timeutil import to_utc_naive, utc_day_bounds

__all__ = [
    "hash_password", "verify_password", "create_access_token", "decode_token",
    "to_utc_naive", "utc_day_bounds",
]
