from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from . import config
import logging

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """
    Tùy chọn tạo engine theo loại database.

    SQLite (dùng khi chạy test) cần tắt check_same_thread vì FastAPI chạy
    các route đồng bộ trong threadpool; database in-memory phải dùng chung
    một kết nối duy nhất.
    """
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True, "pool_recycle": 3600}


# Một connection pool duy nhất cho toàn bộ vòng đời của process
engine = create_engine(config.DATABASE_URL, echo=config.DB_ECHO, **_engine_options(config.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency cung cấp một Session cho mỗi request và đóng lại sau khi xử lý xong."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
