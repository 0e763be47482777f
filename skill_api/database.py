# database.py
import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from skill_api.config import build_sqlalchemy_db_url, mask_db_url, settings


logger = logging.getLogger(__name__)


def _build_connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def build_engine(db_url: str) -> Engine:
    return create_engine(db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(db_url))


_db_url = build_sqlalchemy_db_url(settings)
engine = build_engine(_db_url)
logger.info("SQLAlchemy db_url=%s", mask_db_url(_db_url))

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def check_connection(bind: Engine | None = None) -> bool:
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Error: Can't connect to database")
        return False
    return True
