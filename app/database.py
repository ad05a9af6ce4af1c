import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger("app.database")

Base = declarative_base()


def make_engine(url: str) -> Engine:
    """
    Build an engine for `url`.
    SQLite: allow use across the server's worker threads, keep a single
    connection for in-memory databases, and turn on foreign keys.
    """
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)

    # reviews.course_id -> courses.id 需要 SQLite 開啟 foreign_keys
    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


engine = make_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(bind: Engine = engine, drop: bool = False):
    # 建立資料表（若不存在）
    from app.models import course, review  # noqa: F401

    if drop:
        logger.info("Dropping existing tables")
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
