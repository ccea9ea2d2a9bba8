# cart_api/data/database.py
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker

from cart_api.utils.settings import DATABASE_URL, DB_CONNECT_ATTEMPTS, DB_ECHO
from cart_api.utils.retry import db_retry
from cart_api.utils.logging import get_logger

logger = get_logger(__name__)


def _connect_args(url: str) -> dict:
    #sqlite + threadpool fastapi
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def enable_sqlite_foreign_keys(engine):
    """SQLite domyslnie ignoruje FOREIGN KEY, wlaczamy per polaczenie."""

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(
    DATABASE_URL,
    echo=DB_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(DATABASE_URL),
)

if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(bind=engine, autoflush=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _ping(bind):
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))


def wait_for_db(bind=None, attempts: int = DB_CONNECT_ATTEMPTS, wait=None):
    bind = bind or engine
    logger.info(f"Sprawdzanie polaczenia z baza ({bind.dialect.name})")
    db_retry(attempts, wait)(_ping)(bind)


def init_db(bind=None, attempts: int = DB_CONNECT_ATTEMPTS, wait=None):
    """
    Czeka az baza bedzie dostepna i tworzy brakujace tabele.
    Blad po wyczerpaniu prob leci dalej i zatrzymuje start aplikacji.
    """
    bind = bind or engine

    # import modeli zeby zarejestrowaly sie w Base.metadata
    from cart_api.data import models  # noqa: F401

    wait_for_db(bind, attempts, wait)
    Base.metadata.create_all(bind=bind)
    logger.info(f"Tabele gotowe: {list(Base.metadata.tables.keys())}")
