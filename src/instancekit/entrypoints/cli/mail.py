"""INSTANCEKIT mail CLI: preview recipient sanitization.

``instancekit mail sanitize RECIPIENT...`` prints the comma-joined result
that outbound mail would be addressed to in this environment.
"""

from __future__ import annotations

import click

from instancekit.bootstrap import bootstrap_queries

from .db import get_checked_url


@click.group("mail")
def mail_group() -> None:
    """Outbound mail helpers."""


@mail_group.command()
@click.argument("recipients", nargs=-1)
def sanitize(recipients: tuple[str, ...]) -> None:
    """Rewrite RECIPIENTS the way sub-production mail would be addressed.

    Each RECIPIENT is a bare address or a display-name form such as
    '"Jane Roe" <jane@example.com>'.
    """
    with bootstrap_queries(get_checked_url()) as queries:
        click.echo(queries.mail_helper.add_test_to_addresses(list(recipients)))
