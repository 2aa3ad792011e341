import re
from datetime import datetime
from uuid import uuid4

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

_PREFIXED_ID_PATTERN = re.compile(r"^(?P<prefix>[a-z]+)_(?P<token>[0-9a-f]{16})$")


def prefixed_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:16]}"


def is_prefixed_id(value: str, prefix: str) -> bool:
    match = _PREFIXED_ID_PATTERN.match(value or "")
    return match is not None and match.group("prefix") == prefix


class Base(DeclarativeBase):
    pass


class TimestampedMixin:
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
