"""
Audit metadata shared by every persisted entity.

Entities that inherit ``Auditable`` get four columns (creator, creation time,
last modifier, last modification time) which are stamped by mapper listeners
on every insert and update. The identity written is the *current auditor*,
bound per task through a context variable so concurrent requests never see
each other's identity. When nothing is bound, ``settings.AUDIT_DEFAULT_USER``
is recorded.

Usage:
    with auditor("admin"):
        session.add(user)
        await session.flush()
"""
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator, Optional

from sqlalchemy import DateTime, String, event
from sqlalchemy.orm import Mapped, mapped_column

from usermodel.core.config import settings

logger = logging.getLogger(__name__)

_current_auditor: ContextVar[Optional[str]] = ContextVar("current_auditor", default=None)


def get_current_auditor() -> str:
    """Return the identity bound to the running task, or the configured default."""
    return _current_auditor.get() or settings.AUDIT_DEFAULT_USER


@contextmanager
def auditor(name: str) -> Iterator[str]:
    """Bind ``name`` as the current auditor for the duration of the block."""
    token = _current_auditor.set(name)
    try:
        yield name
    finally:
        _current_auditor.reset(token)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Auditable:
    """Mixin adding created/last-modified audit columns."""

    created_by: Mapped[Optional[str]] = mapped_column(String(255))
    created_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    last_modified_by: Mapped[Optional[str]] = mapped_column(String(255))
    last_modified_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))


@event.listens_for(Auditable, "before_insert", propagate=True)
def _stamp_insert(mapper, connection, target: Auditable) -> None:
    who = get_current_auditor()
    now = _utcnow()
    target.created_by = who
    target.created_date = now
    target.last_modified_by = who
    target.last_modified_date = now
    logger.debug("Audit insert %s by %s", mapper.class_.__name__, who)


@event.listens_for(Auditable, "before_update", propagate=True)
def _stamp_update(mapper, connection, target: Auditable) -> None:
    who = get_current_auditor()
    target.last_modified_by = who
    target.last_modified_date = _utcnow()
    logger.debug("Audit update %s by %s", mapper.class_.__name__, who)
