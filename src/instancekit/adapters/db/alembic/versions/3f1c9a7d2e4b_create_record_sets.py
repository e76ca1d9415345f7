"""Create record-set tables

Revision ID: 3f1c9a7d2e4b
Revises:
Create Date: 2026-10-16

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2e4b"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "instances",
        sa.Column("sys_id", sa.String(length=32), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("sys_id", name=op.f("pk_instances")),
        sa.UniqueConstraint("name", name=op.f("uq_instances_name")),
        comment="Platform instances (deployments) that can carry overrides.",
    )
    op.create_table(
        "properties",
        sa.Column("sys_id", sa.String(length=32), nullable=False),
        sa.Column("key", sa.String(length=200), nullable=False),
        sa.Column("default_value", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("sys_id", name=op.f("pk_properties")),
        sa.UniqueConstraint("key", name=op.f("uq_properties_key")),
        comment="Configuration properties with their global default values.",
    )
    op.create_table(
        "property_overrides",
        sa.Column("sys_id", sa.String(length=32), nullable=False),
        sa.Column("instance", sa.String(length=32), nullable=False),
        sa.Column("key", sa.String(length=200), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["instance"],
            ["instances.sys_id"],
            name=op.f("fk_property_overrides_instance_instances"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("sys_id", name=op.f("pk_property_overrides")),
        comment="Instance-specific property values; take precedence over defaults.",
    )
    op.create_index(
        op.f("ix_property_overrides_property_overrides_instance_property_overrides_key"),
        "property_overrides",
        ["instance", "key"],
        unique=False,
    )
    op.create_table(
        "sys_properties",
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("name", name=op.f("pk_sys_properties")),
        comment="Flat system properties (e.g. instance_name, mail whitelist).",
    )
    op.create_table(
        "users",
        sa.Column("sys_id", sa.String(length=32), nullable=False),
        sa.Column("user_name", sa.String(length=100), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("sys_id", name=op.f("pk_users")),
        comment="Directory users.",
    )
    op.create_index(op.f("ix_users_users_email"), "users", ["email"], unique=False)
    op.create_table(
        "group_members",
        sa.Column("sys_id", sa.String(length=32), nullable=False),
        sa.Column("user", sa.String(length=32), nullable=False),
        sa.Column("group", sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(
            ["user"],
            ["users.sys_id"],
            name=op.f("fk_group_members_user_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("sys_id", name=op.f("pk_group_members")),
        sa.UniqueConstraint("user", "group", name=op.f("uq_group_members_user_group")),
        comment="Group membership pairs.",
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("group_members")
    op.drop_index(op.f("ix_users_users_email"), table_name="users")
    op.drop_table("users")
    op.drop_table("sys_properties")
    op.drop_index(
        op.f("ix_property_overrides_property_overrides_instance_property_overrides_key"),
        table_name="property_overrides",
    )
    op.drop_table("property_overrides")
    op.drop_table("properties")
    op.drop_table("instances")
