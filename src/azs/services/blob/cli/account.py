import typer

from azs.core.dispatcher import AccountCommand
from azs.core.models import operation_command_name
from azs.core.runner import run_command
from azs.services.blob.client import AccountOperation

app = typer.Typer(help="Interact with the storage account", rich_markup_mode=None)


def _run(ctx: typer.Context, command: AccountCommand):
    exit_code = run_command(ctx, command)
    if exit_code != 0:
        raise typer.Exit(exit_code)


def create_operation_command(operation: AccountOperation, command_help_text: str):
    """
    Factory function for account operations that take no arguments.
    """

    def command(ctx: typer.Context):
        _run(ctx, AccountCommand(operation=operation))

    command.__doc__ = command_help_text
    return command


HELP_TEXT_MAP = {
    AccountOperation.GET_ACCOUNT_INFORMATION: "Get the SKU name and account kind",
    AccountOperation.GET_SERVICE_PROPERTIES: (
        "Get the blob service properties (logging, metrics, CORS rules)"
    ),
    AccountOperation.GET_SERVICE_STATS: (
        "Get geo-replication statistics (read-access geo-redundant accounts only)"
    ),
}

CMD_NAME_MAP = {
    AccountOperation.GET_ACCOUNT_INFORMATION: "info",
    AccountOperation.GET_SERVICE_PROPERTIES: "properties",
    AccountOperation.GET_SERVICE_STATS: "stats",
}

for operation, help_text in HELP_TEXT_MAP.items():
    app.command(CMD_NAME_MAP[operation])(create_operation_command(operation, help_text))


@app.command(operation_command_name(AccountOperation.LIST_CONTAINERS))
def list_containers(
    ctx: typer.Context,
    prefix: str = typer.Option(
        None, "--prefix", help="Only list containers whose name starts with this"
    ),
):
    """
    List the containers in the storage account.
    """
    _run(
        ctx,
        AccountCommand(
            operation=AccountOperation.LIST_CONTAINERS, arguments={"prefix": prefix}
        ),
    )


@app.command(operation_command_name(AccountOperation.FIND_BLOBS_BY_TAGS))
def find_blobs_by_tags(
    ctx: typer.Context,
    filter_expression: str = typer.Argument(
        ..., help="blob tag filter expression, e.g. \"project\" = 'azs'"
    ),
):
    """
    Find blobs across all containers whose tags match a filter expression.
    """
    _run(
        ctx,
        AccountCommand(
            operation=AccountOperation.FIND_BLOBS_BY_TAGS,
            arguments={"filter_expression": filter_expression},
        ),
    )
