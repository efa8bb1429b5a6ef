from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


# ------------------------------------------------------------------------------
# DATABASE ENGINE & SESSION
# ------------------------------------------------------------------------------
class Database:
    """Storage handle: one engine and session factory per application."""

    def __init__(self, url: str):
        self.url = url
        engine_kwargs = {}

        if url.startswith("sqlite"):
            # Sessions are used from FastAPI's threadpool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # In-memory databases live as long as their one connection
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        try:
            self.engine = create_engine(url, **engine_kwargs)
            self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        except Exception as e:
            logger.error(f"❌ Failed to create SQLAlchemy engine: {e}")
            raise

    def init_db(self):
        """Create database tables if they do not exist yet."""
        from string_analyzer import models  # noqa: F401  ensure models are registered
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("✅ Database tables created successfully.")
        except Exception as e:
            logger.error(f"❌ Database initialization failed: {e}")
            raise

    def dispose(self):
        self.engine.dispose()


# ------------------------------------------------------------------------------
# DB DEPENDENCY
# ------------------------------------------------------------------------------
def get_db(request: Request):
    """Dependency to provide a DB session from the application's storage handle."""
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
