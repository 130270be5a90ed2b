# db/database.py
import logging
import os
from dotenv import load_dotenv

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

load_dotenv()

logger = logging.getLogger(__name__)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tasks.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")


def make_engine(url: str = DATABASE_URL, **kwargs):
    """
    SQLite はリクエストごとに別スレッドから触られるので check_same_thread を外す
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, echo=SQL_ECHO, **kwargs)


engine = make_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    users / tasks テーブルが無ければ作る（既存データには触らない）
    開けない・作れない場合は起動失敗として例外をそのまま投げる
    """
    # テーブル定義を metadata に登録させる
    from models.user import User  # noqa: F401
    from models.task import Task  # noqa: F401

    bind = bind or engine
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError:
        logger.critical("Could not initialize database at %s", bind.url, exc_info=True)
        raise
    logger.info("Database ready: %s", bind.url)
