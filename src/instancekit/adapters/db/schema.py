"""Record-set schema.

Each table here is one named record set reachable through the
`RecordStore` port. Column names are the field names used in query
predicates, so renaming a column is a breaking change for callers.

| Table                | Holds                                              |
|----------------------|----------------------------------------------------|
| `instances`          | deployments/tenants, looked up by `name`           |
| `properties`         | property keys and their global default values      |
| `property_overrides` | per-instance values, keyed by (`instance`, `key`)  |
| `sys_properties`     | flat name → value system properties                |
| `users`              | directory users, looked up by `email`              |
| `group_members`      | (`user`, `group`) membership pairs                 |

`property_overrides` deliberately has no uniqueness on (`instance`, `key`);
readers take the first match.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    String,
    Table,
    Text,
    UniqueConstraint,
    true,
)

from .metadata import metadata

__all__ = [
    "instances",
    "properties",
    "property_overrides",
    "sys_properties",
    "users",
    "group_members",
    "RECORD_SETS",
]

SYS_ID_LENGTH = 32

instances = Table(
    "instances",
    metadata,
    Column("sys_id", String(SYS_ID_LENGTH), primary_key=True),
    Column("name", String(100), nullable=False, unique=True),
    Column("description", Text, nullable=True),
    comment="Platform instances (deployments) that can carry overrides.",
)

properties = Table(
    "properties",
    metadata,
    Column("sys_id", String(SYS_ID_LENGTH), primary_key=True),
    Column("key", String(200), nullable=False, unique=True),
    Column("default_value", Text, nullable=True),
    Column("description", Text, nullable=True),
    comment="Configuration properties with their global default values.",
)

property_overrides = Table(
    "property_overrides",
    metadata,
    Column("sys_id", String(SYS_ID_LENGTH), primary_key=True),
    Column(
        "instance",
        String(SYS_ID_LENGTH),
        ForeignKey("instances.sys_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("key", String(200), nullable=False),
    Column("value", Text, nullable=True),
    Index(None, "instance", "key"),
    comment="Instance-specific property values; take precedence over defaults.",
)

sys_properties = Table(
    "sys_properties",
    metadata,
    Column("name", String(200), primary_key=True),
    Column("value", Text, nullable=True),
    comment="Flat system properties (e.g. instance_name, mail whitelist).",
)

users = Table(
    "users",
    metadata,
    Column("sys_id", String(SYS_ID_LENGTH), primary_key=True),
    Column("user_name", String(100), nullable=True),
    Column("email", String(255), nullable=True, index=True),
    Column("active", Boolean, nullable=False, server_default=true()),
    comment="Directory users.",
)

group_members = Table(
    "group_members",
    metadata,
    Column("sys_id", String(SYS_ID_LENGTH), primary_key=True),
    Column(
        "user",
        String(SYS_ID_LENGTH),
        ForeignKey("users.sys_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("group", String(SYS_ID_LENGTH), nullable=False),
    UniqueConstraint("user", "group"),
    comment="Group membership pairs.",
)

RECORD_SETS: dict[str, Table] = {
    table.name: table
    for table in (
        instances,
        properties,
        property_overrides,
        sys_properties,
        users,
        group_members,
    )
}
