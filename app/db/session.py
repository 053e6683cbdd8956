from fastapi import Request
from sqlalchemy import Column, DateTime, create_engine, event, func
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Process-wide database handle: one engine (and its pool) plus the session
    factory bound to it. Created by the application lifespan and disposed at
    shutdown; everything that needs persistence receives it explicitly.
    """

    def __init__(self, url: str):
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False

        self.engine = create_engine(url, pool_pre_ping=True, connect_args=connect_args)
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request):
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
