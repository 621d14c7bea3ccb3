"""Column types shared by the models."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Numeric
from sqlalchemy.dialects import mysql

# naive UTC with microseconds; MySQL DATETIME drops them unless fsp is set
Timestamp = DateTime().with_variant(mysql.DATETIME(fsp=6), "mysql")

Decimal10_2 = Numeric(10, 2)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
