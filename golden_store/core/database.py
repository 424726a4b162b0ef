from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from golden_store.core import config

connect_args = {"check_same_thread": False} if config.DB_URL.startswith("sqlite") else {}

engine = create_engine(config.DB_URL, pool_pre_ping=True, future=True, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # models register themselves on Base.metadata at import
    from golden_store.models import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def require_online():
    from golden_store.core.errors import ServiceUnavailable

    if config.OFFLINE_MODE:
        raise ServiceUnavailable("Database is offline; changes are disabled.")
