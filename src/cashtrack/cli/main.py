"""Main CLI entry point."""

import click
from cashtrack.cli.logging_config import LOG_LEVELS, configure_logging
from cashtrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from cashtrack.cli.commands import transaction


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CASHTRACK_DB_PATH environment variable)",
    envvar="CASHTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="CASHTRACK_LOG_LEVEL",
    help="Logging verbosity (overrides CASHTRACK_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Cashtrack - personal finance movement tracking.

    Record deposits, withdrawals, transfers, payments and refunds between
    your accounts and follow each one from pending to its final state.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
