"""Build the query services on top of concrete adapters."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from instancekit import config
from instancekit.adapters.db.engine import make_engine
from instancekit.adapters.directory import RecordStoreUserDirectory
from instancekit.adapters.properties import RecordStorePropertySource
from instancekit.adapters.record_store import SqlAlchemyRecordStore
from instancekit.service_layer import InstanceConfig, MailHelper

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

    from instancekit.interfaces.properties import PropertySource
    from instancekit.interfaces.record_store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class QueryContainer:
    """The wired query services, plus the connection they read through.

    Use as a context manager (or call `close()`) to release the connection.
    """

    instance_config: InstanceConfig
    mail_helper: MailHelper
    connection: Connection | None = field(default=None, repr=False)
    engine: Engine | None = field(default=None, repr=False)

    def close(self) -> None:
        """Release the underlying connection and engine, if any."""
        if self.connection is not None:
            self.connection.close()
            self.connection = None
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def __enter__(self) -> QueryContainer:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def build_queries(
    store: RecordStore, properties: PropertySource | None = None
) -> QueryContainer:
    """Wire `InstanceConfig` and `MailHelper` to `store`.

    Args:
        store: Record store for instances, properties, users and groups.
        properties: System property source. Defaults to the `sys_properties`
            record set of `store`.

    Returns:
        QueryContainer: The services; `connection` is left unset.
    """
    properties = properties or RecordStorePropertySource(store)
    instance_name = config.get_instance_name(properties)
    logger.debug("Resolving configuration for instance %r", instance_name)

    return QueryContainer(
        instance_config=InstanceConfig(store, instance_name),
        mail_helper=MailHelper.from_properties(
            RecordStoreUserDirectory(store), properties
        ),
    )


def bootstrap_queries(url: str | None = None) -> QueryContainer:
    """Open the configured database and build the query services.

    Args:
        url: Database URL. Defaults to `INSTANCEKIT_DB_URL`.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    engine = make_engine(url or config.get_db_url())
    connection = engine.connect()
    try:
        container = build_queries(SqlAlchemyRecordStore(connection))
    except Exception:
        connection.close()
        engine.dispose()
        raise
    container.connection = connection
    container.engine = engine
    return container
