"""
Storage gateway: a single pooled SQLAlchemy engine shared by the whole process.

The gateway never translates or retries store errors. Callers get the native
``SQLAlchemyError`` and can ask ``is_unique_violation`` whether it came from a
uniqueness constraint.
"""
import logging
import os
import ssl
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

# MySQL ER_DUP_ENTRY / PostgreSQL unique_violation
MYSQL_DUPLICATE_ENTRY = 1062
PG_UNIQUE_VIOLATION = "23505"


def build_ssl_context(ssl_ca: str) -> ssl.SSLContext:
    """Build a verifying TLS context from PEM text or a CA file path."""
    if "-----BEGIN" in ssl_ca:
        context = ssl.create_default_context(cadata=ssl_ca)
    else:
        context = ssl.create_default_context(cafile=os.path.expanduser(ssl_ca))
    context.check_hostname = True
    context.verify_mode = ssl.CERT_REQUIRED
    return context


class StorageGateway:
    """Bounded connection pool to the relational store."""

    def __init__(
        self,
        url: str,
        pool_size: int = 10,
        pool_timeout: float = 30.0,
        pool_recycle: int = 1800,
        ssl_ca: Optional[str] = None,
        echo: bool = False,
    ):
        self.url = make_url(url)
        connect_args = {}
        if self.url.get_backend_name() == "sqlite":
            # Pooled connections cross FastAPI worker threads
            connect_args["check_same_thread"] = False
        elif ssl_ca:
            connect_args["ssl"] = build_ssl_context(ssl_ca)

        # max_overflow=0 caps in-flight statements at pool_size; extra
        # checkouts wait up to pool_timeout instead of failing
        self.engine = create_engine(
            self.url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info(
            "Storage pool ready: %s (size=%d, timeout=%.1fs, tls=%s)",
            self.url.render_as_string(hide_password=True),
            pool_size,
            pool_timeout,
            "ssl" in connect_args,
        )

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Check a session out of the pool; roll back on error, always release."""
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def create_all(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        from exam_server import models  # noqa: F401  registers the tables on Base

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Storage pool disposed")


def is_unique_violation(exc: Exception) -> bool:
    """Tell a uniqueness-constraint violation apart from any other store error."""
    if not isinstance(exc, IntegrityError):
        return False
    orig = exc.orig
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session from the process-wide pool."""
    storage: StorageGateway = request.app.state.storage
    with storage.session() as db:
        yield db
