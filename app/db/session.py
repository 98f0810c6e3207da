import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from app.config import settings

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./app.db"

class Base(DeclarativeBase):
    pass

def normalize_database_url(url: str) -> str:
    """Route bare PostgreSQL URLs to the psycopg 3 driver."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix):]
    return url

def build_engine(url: str, **kwargs) -> Engine:
    url = normalize_database_url(url)
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)
    return create_engine(url, **kwargs)

def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)

engine = build_engine(settings.database_url or os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL))
SessionLocal = make_session_factory(engine)

def init_db(bind: Engine | None = None):
    from app.models import user, task, upload, supplier, invoice  # noqa: F401
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("database ready (%s)", bind.dialect.name)
