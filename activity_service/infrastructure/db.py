import threading
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base
from ..config import settings


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection keeps the in-memory database alive
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {"pool_pre_ping": True}


class Store:
    """Owns the engine and serializes sessions over it.

    Only one session is open at a time, so a check followed by a write
    (username uniqueness, join membership) runs as a single atomic step.
    """

    def __init__(self, url: str | None = None):
        self.url = url or settings.DATABASE_URL
        self.engine = create_engine(self.url, echo=False, **_engine_kwargs(self.url))
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        self._lock = threading.Lock()

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        with self._lock:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()


def get_store(request: Request) -> Store:
    # sessions are opened inside the endpoint so the lock is taken and
    # released on the same worker thread
    return request.app.state.store
