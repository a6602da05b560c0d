# citywheels/db.py
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from .config import settings
from .models.base import Base

logger = logging.getLogger(__name__)

# ---------- Engine / Session ----------
# Строка берётся из настроек (например из .env через citywheels.config.settings)
DATABASE_URL = settings.DATABASE_URL


def make_engine(url: str):
    # для sqlite нужен check_same_thread=False: сессии живут в пуле потоков FastAPI
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
            future=True,
        )
    return create_engine(url, pool_pre_ping=True, future=True)


engine = make_engine(DATABASE_URL)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)


def init_db() -> None:
    """
    Создать таблицы (вызывается на старте приложения).
    В проде схему ведёт alembic, тогда AUTO_CREATE_TABLES=false.
    """
    from . import models  # noqa: F401  регистрируем все таблицы в Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured on %s", engine.url.render_as_string(hide_password=True))


# ---------- Dependency ----------
def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ---------- Transactions ----------
@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Все записи внутри блока либо фиксируются вместе, либо откатываются.
    Исключение после отката пробрасывается дальше.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
