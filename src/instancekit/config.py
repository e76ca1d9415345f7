"""Configuration utilities for INSTANCEKIT.

This module centralizes small helpers and constants related to application
configuration: the database URL, the names of the system properties the
utilities read, and the Alembic configuration builder.
"""

from __future__ import annotations

import os
import sys
from importlib.resources import files
from typing import TYPE_CHECKING, TextIO

from alembic.config import Config

if TYPE_CHECKING:
    from instancekit.interfaces.properties import PropertySource

DB_URL_ENV_VAR = "INSTANCEKIT_DB_URL"  # pragma: no mutate
INSTANCE_NAME_ENV_VAR = "INSTANCEKIT_INSTANCE_NAME"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate

# System property names
INSTANCE_NAME_PROPERTY = "instance_name"
RECEIVING_ADDRESSES_PROPERTY = "mck.email.subProdEmail.ReceivingAddresses"
RECEIVING_GROUP_IDS_PROPERTY = "mck.email.subProdEmail.ReceivingGroupIds"


class DatabaseUrlNotSetError(Exception):
    """Raised when the INSTANCEKIT_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `INSTANCEKIT_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `INSTANCEKIT_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url


def get_instance_name(properties: PropertySource) -> str | None:
    """Resolve the process-wide instance identifier.

    `INSTANCEKIT_INSTANCE_NAME` wins when set; otherwise the
    `instance_name` system property is read from `properties`.

    Args:
        properties: The system property source to fall back to.

    Returns:
        The instance name, or None if neither source defines one.
    """
    if name := os.environ.get(INSTANCE_NAME_ENV_VAR):
        return name
    return properties.get_property(INSTANCE_NAME_PROPERTY)


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for INSTANCEKIT's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → INSTANCEKIT's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///:memory:`). Can be
            `None` (default) only in contexts where Alembic won't need to
            connect to the DB.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to INSTANCEKIT's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("instancekit.adapters.db.alembic")),
    )
    return cfg
