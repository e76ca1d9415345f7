"""INSTANCEKIT config CLI: read instance configuration.

Commands
- ``instancekit config name`` prints the configured instance's name.
- ``instancekit config get KEY`` prints the resolved property value
  (instance override, else global default).

Results go to stdout; a missing instance or property exits with status 1
and a warning on stderr.
"""

from __future__ import annotations

import click

from instancekit.bootstrap import bootstrap_queries

from .db import get_checked_url
from .helpers import warn

NOT_FOUND_EXIT_CODE = 1


@click.group("config")
def config_group() -> None:
    """Instance configuration lookups."""


@config_group.command()
def name() -> None:
    """Show the name of the configured instance."""
    with bootstrap_queries(get_checked_url()) as queries:
        instance_name = queries.instance_config.get_name()
        instance_id = queries.instance_config.instance_id
    if instance_name is None:
        warn(f"Instance {instance_id!r} not found.")
        raise click.exceptions.Exit(NOT_FOUND_EXIT_CODE)
    click.echo(instance_name)


@config_group.command()
@click.argument("key")
def get(key: str) -> None:
    """Show the value of property KEY for the configured instance."""
    with bootstrap_queries(get_checked_url()) as queries:
        value = queries.instance_config.get_key(key)
    if value is None:
        warn(f"Property {key!r} not found.")
        raise click.exceptions.Exit(NOT_FOUND_EXIT_CODE)
    click.echo(value)
