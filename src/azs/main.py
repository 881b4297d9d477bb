"""
Entry Point.
This is the root of the CLI command tree. It should not contain business logic.
It declares the global options, aggregates the per-family sub-applications and
registers the hidden readme command.
"""

from importlib.metadata import PackageNotFoundError, version

import typer
from pydantic import ValidationError

from azs.core.commands import compile_command_tree
from azs.core.dispatcher import ReadmeCommand
from azs.core.readme import PROJECT_DESCRIPTION, ReadmeSettings
from azs.core.runner import run_command
from azs.core.settings import (
    ACCESS_KEY_ENV_VAR,
    ACCOUNT_ENV_VAR,
    DEFAULT_ENDPOINT_SUFFIX,
    ENDPOINT_SUFFIX_ENV_VAR,
    Invocation,
)
from azs.services.blob.cli import account_app, container_app
from azs.services.datalake.cli import datalake_app
from azs.services.queues.cli import queues_app
from azs.services.tables.cli import tables_app

PACKAGE_NAME = "azure-storage-cli"

app = typer.Typer(
    help=PROJECT_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=None,
)


def version_callback(value: bool):
    if value:
        try:
            typer.echo(f"{PACKAGE_NAME} {version(PACKAGE_NAME)}")
        except PackageNotFoundError:
            typer.echo(f"{PACKAGE_NAME} (not installed)")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    account: str = typer.Option(
        None,
        "--account",
        envvar=ACCOUNT_ENV_VAR,
        show_default=False,
        help=(
            "storage account name.  Set the environment variable "
            f"{ACCOUNT_ENV_VAR} to set a default"
        ),
    ),
    access_key: str = typer.Option(
        None,
        "--access-key",
        envvar=ACCESS_KEY_ENV_VAR,
        show_default=False,
        help=(
            "storage account access key.  If not set, authentication will be done "
            "via Azure Entra Id using the `DefaultAzureCredential`"
        ),
    ),
    endpoint_suffix: str = typer.Option(
        DEFAULT_ENDPOINT_SUFFIX,
        "--endpoint-suffix",
        envvar=ENDPOINT_SUFFIX_ENV_VAR,
        help="DNS suffix of the storage endpoints (for sovereign clouds)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Log debug output to stderr"
    ),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Print the version and exit",
    ),
):
    # Checked when a leaf runs, so subcommand --help works without an account.
    if account is None:
        return

    try:
        ctx.obj = Invocation(
            account=account,
            access_key=access_key,
            endpoint_suffix=endpoint_suffix,
            verbose=verbose,
        )
    except ValidationError as e:
        fields = {str(error["loc"][0]) for error in e.errors()}
        param_hint = "--endpoint-suffix" if fields == {"endpoint_suffix"} else "--account"
        raise typer.BadParameter("must not be empty", param_hint=param_hint) from e


app.add_typer(account_app, name="account")
app.add_typer(container_app, name="container")
app.add_typer(queues_app, name="queues")
app.add_typer(datalake_app, name="datalake")
app.add_typer(tables_app, name="tables")


@app.command("readme", hidden=True)
def readme(ctx: typer.Context):
    settings = ReadmeSettings()
    tree = compile_command_tree(typer.main.get_command(app), settings.binary_name)
    exit_code = run_command(ctx, ReadmeCommand(tree=tree, settings=settings))
    if exit_code != 0:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
