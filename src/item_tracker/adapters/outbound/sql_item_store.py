"""SQLAlchemy-backed durable item store.

The items table holds an auto-incrementing id and a unique title.
PostgreSQL is the production target; SQLite works for local runs and
tests.

Usage:
    engine = build_engine(config.durable)
    store = SqlItemStore(engine, table_name="items")
    store.create_table()
    item = store.insert_item("buy milk")
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    insert,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.pool import StaticPool

from item_tracker.domain.entities import Item, ItemTitle
from item_tracker.infrastructure.config import DurableStoreConfig
from item_tracker.infrastructure.logging import get_logger
from item_tracker.ports.outbound.errors import (
    DuplicateTitleError,
    StoreConnectionError,
    StoreError,
)

STORE_NAME = "durable"

# Failures that mean the database could not be reached at all.
_CONNECTION_ERRORS = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)

logger = get_logger(__name__)


def build_engine(config: DurableStoreConfig) -> Engine:
    """Create the pooled engine shared by every request.

    Args:
        config: Durable store configuration.

    Returns:
        A SQLAlchemy engine.
    """
    if config.url.startswith("sqlite"):
        return create_engine(
            config.url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        config.url,
        pool_size=config.pool_size,
        pool_recycle=config.pool_recycle_seconds,
        pool_timeout=config.pool_timeout_seconds,
        pool_pre_ping=True,
        connect_args={"connect_timeout": config.connect_timeout_seconds},
    )


class SqlItemStore:
    """Durable item store implementing ItemStorePort."""

    def __init__(self, engine: Engine, table_name: str = "items") -> None:
        """Initialize the store.

        Args:
            engine: Pooled SQLAlchemy engine.
            table_name: Name of the items table.
        """
        self._engine = engine
        self._metadata = MetaData()
        self._table = Table(
            table_name,
            self._metadata,
            Column("id", Integer, primary_key=True, autoincrement=True),
            Column("title", Text, nullable=False, unique=True),
        )

    @property
    def table(self) -> Table:
        return self._table

    def create_table(self) -> None:
        try:
            self._metadata.create_all(self._engine, checkfirst=True)
        except _CONNECTION_ERRORS as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except SQLAlchemyError as e:
            raise StoreError(STORE_NAME, str(e)) from e

        logger.info("item_table_ready", table=self._table.name)

    def insert_item(self, title: str) -> Item:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(insert(self._table).values(title=title))
                item_id = result.inserted_primary_key[0]
        except IntegrityError as e:
            raise DuplicateTitleError(STORE_NAME, title) from e
        except _CONNECTION_ERRORS as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except SQLAlchemyError as e:
            raise StoreError(STORE_NAME, str(e)) from e

        logger.debug("item_inserted", item_id=item_id, title=title)
        return Item(id=item_id, title=title)

    def list_items(self) -> list[ItemTitle]:
        query = select(self._table.c.title).order_by(self._table.c.id)
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).all()
        except _CONNECTION_ERRORS as e:
            raise StoreConnectionError(STORE_NAME, str(e)) from e
        except SQLAlchemyError as e:
            raise StoreError(STORE_NAME, str(e)) from e

        return [ItemTitle(title=row.title) for row in rows]
