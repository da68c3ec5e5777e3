# clientflow/db/engine.py

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine


def create_db_engine(url: str) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, future=True, connect_args=connect_args)

    if engine.dialect.name == "sqlite":
        # Cascading deletes only fire with foreign keys enabled per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def get_engine(request: Request) -> Engine:
    """
    FastAPI dependency: the engine opened by the application lifespan.
    """
    return request.app.state.engine
