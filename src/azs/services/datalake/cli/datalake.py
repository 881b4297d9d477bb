from pathlib import Path

import typer

from azs.core.dispatcher import DatalakeCommand
from azs.core.models import operation_command_name
from azs.core.runner import run_command
from azs.services.datalake.client import DatalakeOperation

app = typer.Typer(help="Interact with storage datalakes", rich_markup_mode=None)


def _run(ctx: typer.Context, operation: DatalakeOperation, **arguments):
    exit_code = run_command(
        ctx, DatalakeCommand(operation=operation, arguments=arguments)
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


def create_file_system_command(operation: DatalakeOperation, command_help_text: str):
    def command(
        ctx: typer.Context,
        file_system: str = typer.Argument(..., help="file system name"),
    ):
        _run(ctx, operation, file_system=file_system)

    command.__doc__ = command_help_text
    return command


def create_path_command(operation: DatalakeOperation, command_help_text: str):
    def command(
        ctx: typer.Context,
        file_system: str = typer.Argument(..., help="file system name"),
        path: str = typer.Argument(..., help="path within the file system"),
    ):
        _run(ctx, operation, file_system=file_system, path=path)

    command.__doc__ = command_help_text
    return command


@app.command(operation_command_name(DatalakeOperation.LIST_FILE_SYSTEMS))
def list_file_systems(
    ctx: typer.Context,
    prefix: str = typer.Option(
        None, "--prefix", help="Only list file systems whose name starts with this"
    ),
):
    """
    List the file systems in the storage account.
    """
    _run(ctx, DatalakeOperation.LIST_FILE_SYSTEMS, prefix=prefix)


FILE_SYSTEM_HELP_TEXT_MAP = {
    DatalakeOperation.CREATE_FILE_SYSTEM: "Create a file system",
    DatalakeOperation.DELETE_FILE_SYSTEM: "Delete a file system and its contents",
}

for operation, help_text in FILE_SYSTEM_HELP_TEXT_MAP.items():
    app.command(operation_command_name(operation))(
        create_file_system_command(operation, help_text)
    )


@app.command(operation_command_name(DatalakeOperation.LIST_PATHS))
def list_paths(
    ctx: typer.Context,
    file_system: str = typer.Argument(..., help="file system name"),
    path: str = typer.Option(None, "--path", help="Only list paths under this one"),
    recursive: bool = typer.Option(
        True, "--recursive/--no-recursive", help="Descend into sub-directories"
    ),
):
    """
    List the paths in a file system.
    """
    _run(
        ctx,
        DatalakeOperation.LIST_PATHS,
        file_system=file_system,
        path=path,
        recursive=recursive,
    )


PATH_HELP_TEXT_MAP = {
    DatalakeOperation.CREATE_DIRECTORY: "Create a directory",
    DatalakeOperation.DELETE_DIRECTORY: "Delete a directory and its contents",
}

for operation, help_text in PATH_HELP_TEXT_MAP.items():
    app.command(operation_command_name(operation))(
        create_path_command(operation, help_text)
    )


@app.command(operation_command_name(DatalakeOperation.UPLOAD_FILE))
def upload_file(
    ctx: typer.Context,
    file_system: str = typer.Argument(..., help="file system name"),
    path: str = typer.Argument(..., help="path within the file system"),
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="local file to upload"
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace the file if it already exists"
    ),
):
    """
    Upload a local file.
    """
    _run(
        ctx,
        DatalakeOperation.UPLOAD_FILE,
        file_system=file_system,
        path=path,
        file=file,
        overwrite=overwrite,
    )


@app.command(operation_command_name(DatalakeOperation.DOWNLOAD_FILE))
def download_file(
    ctx: typer.Context,
    file_system: str = typer.Argument(..., help="file system name"),
    path: str = typer.Argument(..., help="path within the file system"),
    output: Path = typer.Option(
        None,
        "--output",
        dir_okay=False,
        help="Write the file to this path instead of stdout",
    ),
):
    """
    Download a file.
    """
    _run(
        ctx,
        DatalakeOperation.DOWNLOAD_FILE,
        file_system=file_system,
        path=path,
        output=output,
    )


app.command(operation_command_name(DatalakeOperation.DELETE_FILE))(
    create_path_command(DatalakeOperation.DELETE_FILE, "Delete a file")
)
