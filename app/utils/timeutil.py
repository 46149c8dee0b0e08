# app/utils/timeutil.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    """伺服器端統一的建立時間 (UTC)"""
    return datetime.now(timezone.utc)
