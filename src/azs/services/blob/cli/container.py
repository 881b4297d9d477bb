from pathlib import Path

import typer

from azs.core.dispatcher import ContainerCommand
from azs.core.models import operation_command_name
from azs.core.runner import run_command
from azs.services.blob.client import ContainerOperation

app = typer.Typer(
    help="Interact with storage containers (and blobs)", rich_markup_mode=None
)


@app.callback()
def container(
    container_name: str = typer.Argument(..., help="container name"),
):
    pass


def _run(ctx: typer.Context, operation: ContainerOperation, **arguments):
    command = ContainerCommand(
        container_name=ctx.parent.params["container_name"],
        operation=operation,
        arguments=arguments,
    )
    exit_code = run_command(ctx, command)
    if exit_code != 0:
        raise typer.Exit(exit_code)


def create_container_command(operation: ContainerOperation, command_help_text: str):
    """
    Factory function for operations on the container itself.
    """

    def command(ctx: typer.Context):
        _run(ctx, operation)

    command.__doc__ = command_help_text
    return command


def create_blob_command(operation: ContainerOperation, command_help_text: str):
    """
    Factory function for operations on a single blob.
    """

    def command(
        ctx: typer.Context,
        blob_name: str = typer.Argument(..., help="blob name"),
    ):
        _run(ctx, operation, blob_name=blob_name)

    command.__doc__ = command_help_text
    return command


CONTAINER_HELP_TEXT_MAP = {
    ContainerOperation.CREATE: "Create the container",
    ContainerOperation.DELETE: "Delete the container and every blob in it",
    ContainerOperation.EXISTS: "Check whether the container exists",
    ContainerOperation.PROPERTIES: "Get the container properties and metadata",
}

BLOB_HELP_TEXT_MAP = {
    ContainerOperation.DELETE_BLOB: "Delete a blob (and its snapshots)",
    ContainerOperation.BLOB_PROPERTIES: "Get the properties of a blob",
    ContainerOperation.BLOB_TAGS: "Get the tags of a blob",
}

for operation, help_text in CONTAINER_HELP_TEXT_MAP.items():
    app.command(operation_command_name(operation))(
        create_container_command(operation, help_text)
    )


@app.command(operation_command_name(ContainerOperation.LIST_BLOBS))
def list_blobs(
    ctx: typer.Context,
    prefix: str = typer.Option(
        None, "--prefix", help="Only list blobs whose name starts with this"
    ),
):
    """
    List the blobs in the container.
    """
    _run(ctx, ContainerOperation.LIST_BLOBS, prefix=prefix)


@app.command(operation_command_name(ContainerOperation.UPLOAD_BLOB))
def upload_blob(
    ctx: typer.Context,
    blob_name: str = typer.Argument(..., help="blob name"),
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="local file to upload"
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Replace the blob if it already exists"
    ),
):
    """
    Upload a local file as a block blob.
    """
    _run(
        ctx,
        ContainerOperation.UPLOAD_BLOB,
        blob_name=blob_name,
        file=file,
        overwrite=overwrite,
    )


@app.command(operation_command_name(ContainerOperation.DOWNLOAD_BLOB))
def download_blob(
    ctx: typer.Context,
    blob_name: str = typer.Argument(..., help="blob name"),
    output: Path = typer.Option(
        None,
        "--output",
        dir_okay=False,
        help="Write the blob to this file instead of stdout",
    ),
):
    """
    Download a blob.
    """
    _run(ctx, ContainerOperation.DOWNLOAD_BLOB, blob_name=blob_name, output=output)


for operation, help_text in BLOB_HELP_TEXT_MAP.items():
    app.command(operation_command_name(operation))(
        create_blob_command(operation, help_text)
    )
