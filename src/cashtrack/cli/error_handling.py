"""Turning errors into CLI output and exit codes."""

import logging

import click

from cashtrack.domain.errors import DomainError

logger = logging.getLogger(__name__)


def fail(ctx: click.Context, message: str) -> None:
    """Print ``Error: <message>`` on stderr and stop with exit code 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Report a rejected operation to the user."""
    logger.debug("Command failed with %s: %s", type(error).__name__, error)
    fail(ctx, str(error))
