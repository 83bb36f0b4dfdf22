"""Transaction management commands."""

import json

import click
from cashtrack.cli.error_handling import fail, handle_domain_error
from cashtrack.domain.dtos import (
    CreateTransactionRequest,
    TransactionResponse,
    UpdateTransactionRequest,
)
from cashtrack.domain.errors import DomainError
from cashtrack.domain.transaction import TransactionService
from cashtrack.utils.amount_parser import parse_amount
from cashtrack.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("create")
@click.option("--user", "user_id", required=True, help="Owning user ID")
@click.option(
    "--type",
    "type_name",
    required=True,
    help="Transaction type: TRANSFER, DEPOSIT, WITHDRAWAL, PAYMENT or REFUND",
)
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45 or $1,200)")
@click.option("--currency", required=True, help="Currency code (e.g., USD)")
@click.option("--description", required=True, help="Transaction description")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to today")
@click.option("--source", "source_account_id", help="Source account ID")
@click.option("--destination", "destination_account_id", help="Destination account ID")
@click.option("--expense", "expense_id", help="Expense ID to link (PAYMENT only)")
@click.option("--income", "income_id", help="Income ID to link (REFUND only)")
@click.pass_context
def create_transaction(
    ctx,
    user_id: str,
    type_name: str,
    amount: str,
    currency: str,
    description: str,
    date: str | None,
    source_account_id: str | None,
    destination_account_id: str | None,
    expense_id: str | None,
    income_id: str | None,
):
    """Record a new pending transaction.

    Examples:
        cashtrack transaction create --user u1 --type DEPOSIT --amount 250 --currency usd --description "Salary" --destination checking
        cashtrack transaction create --user u1 --type TRANSFER --amount 100 --currency USD --description "Savings" --source checking --destination savings
    """
    service = TransactionService(ctx.obj["db"])

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        fail(ctx, f"Invalid amount format: {e}")

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            fail(ctx, f"Invalid date format: {e}")

    request = CreateTransactionRequest(
        user_id=user_id,
        type=type_name,
        amount=txn_amount,
        currency=currency,
        description=description,
        transaction_date=txn_date,
        source_account_id=source_account_id,
        destination_account_id=destination_account_id,
        expense_id=expense_id,
        income_id=income_id,
    )
    try:
        response = service.create_transaction(request)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {response.id}")
    _echo_details(response)


@transaction_group.command("show")
@click.argument("transaction_id")
@click.pass_context
def show_transaction(ctx, transaction_id: str):
    """Show one transaction."""
    service = TransactionService(ctx.obj["db"])
    try:
        response = service.get_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Transaction ID: {response.id}")
    _echo_details(response)


@transaction_group.command("list")
@click.option("--user", "user_id", help="List transactions owned by this user")
@click.option("--account", "account_id", help="List transactions moving money into or out of this account")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
@click.pass_context
def list_transactions(ctx, user_id: str | None, account_id: str | None, as_json: bool):
    """List transactions for a user or an account.

    Exactly one of --user and --account is required.
    """
    if (user_id is None) == (account_id is None):
        fail(ctx, "Specify exactly one of --user or --account")

    service = TransactionService(ctx.obj["db"])
    try:
        if user_id is not None:
            responses = service.list_by_user(user_id)
        else:
            responses = service.list_by_account(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in responses], indent=2))
        return

    if not responses:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(responses)} transaction(s):")
    click.echo("-" * 120)
    click.echo(
        f"{'ID':<36}  {'Date':<10}  {'Type':<10}  {'Status':<9}  {'Amount':>14}  "
        f"{'From':<12}  {'To':<12}  Description"
    )
    click.echo("-" * 120)
    for r in responses:
        amount_str = f"{r.amount:,.2f} {r.currency}"
        click.echo(
            f"{r.id:<36}  {r.transaction_date.isoformat():<10}  {r.type:<10}  {r.status:<9}  "
            f"{amount_str:>14}  {(r.source_account_id or '-'):<12}  "
            f"{(r.destination_account_id or '-'):<12}  {r.description[:30]}"
        )


@transaction_group.command("update")
@click.argument("transaction_id")
@click.option("--status", help="New status: COMPLETED, FAILED or CANCELLED")
@click.option("--description", help="New description (pending transactions only)")
@click.pass_context
def update_transaction(ctx, transaction_id: str, status: str | None, description: str | None):
    """Change a transaction's status and/or description.

    Examples:
        cashtrack transaction update <id> --status completed
        cashtrack transaction update <id> --description "Rent for March"
    """
    if not (status and status.strip()) and not (description and description.strip()):
        fail(ctx, "Nothing to update; pass --status and/or --description")

    service = TransactionService(ctx.obj["db"])
    try:
        response = service.update_transaction(
            transaction_id, UpdateTransactionRequest(status=status, description=description)
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated transaction {response.id}")
    _echo_details(response)


@transaction_group.command("cancel")
@click.argument("transaction_id")
@click.pass_context
def cancel_transaction(ctx, transaction_id: str):
    """Cancel a pending transaction."""
    service = TransactionService(ctx.obj["db"])
    try:
        response = service.cancel_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Cancelled transaction {response.id}")


def _echo_details(response: TransactionResponse) -> None:
    click.echo(f"  User: {response.user_id}")
    click.echo(f"  Type: {response.type}")
    click.echo(f"  Status: {response.status}")
    click.echo(f"  Amount: {response.amount:,.2f} {response.currency}")
    click.echo(f"  Date: {response.transaction_date.isoformat()}")
    click.echo(f"  Description: {response.description}")
    if response.source_account_id:
        click.echo(f"  Source account: {response.source_account_id}")
    if response.destination_account_id:
        click.echo(f"  Destination account: {response.destination_account_id}")
    if response.expense_id:
        click.echo(f"  Expense: {response.expense_id}")
    if response.income_id:
        click.echo(f"  Income: {response.income_id}")
    click.echo(f"  Created: {response.created_at.isoformat()}")
    click.echo(f"  Updated: {response.updated_at.isoformat()}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
