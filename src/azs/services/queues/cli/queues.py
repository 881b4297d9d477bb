import typer

from azs.core.dispatcher import QueuesCommand
from azs.core.models import operation_command_name
from azs.core.runner import run_command
from azs.services.queues.client import QueuesOperation

app = typer.Typer(help="Interact with storage queues", rich_markup_mode=None)


def _run(ctx: typer.Context, operation: QueuesOperation, **arguments):
    exit_code = run_command(
        ctx, QueuesCommand(operation=operation, arguments=arguments)
    )
    if exit_code != 0:
        raise typer.Exit(exit_code)


def create_queue_command(operation: QueuesOperation, command_help_text: str):
    """
    Factory function for operations that only need the queue name.
    """

    def command(
        ctx: typer.Context,
        queue_name: str = typer.Argument(..., help="queue name"),
    ):
        _run(ctx, operation, queue_name=queue_name)

    command.__doc__ = command_help_text
    return command


@app.command(operation_command_name(QueuesOperation.LIST_QUEUES))
def list_queues(
    ctx: typer.Context,
    prefix: str = typer.Option(
        None, "--prefix", help="Only list queues whose name starts with this"
    ),
):
    """
    List the queues in the storage account.
    """
    _run(ctx, QueuesOperation.LIST_QUEUES, prefix=prefix)


HELP_TEXT_MAP = {
    QueuesOperation.CREATE_QUEUE: "Create a queue",
    QueuesOperation.DELETE_QUEUE: "Delete a queue and all of its messages",
    QueuesOperation.QUEUE_PROPERTIES: (
        "Get the metadata and approximate message count of a queue"
    ),
}

for operation, help_text in HELP_TEXT_MAP.items():
    app.command(operation_command_name(operation))(
        create_queue_command(operation, help_text)
    )


@app.command(operation_command_name(QueuesOperation.SEND_MESSAGE))
def send_message(
    ctx: typer.Context,
    queue_name: str = typer.Argument(..., help="queue name"),
    content: str = typer.Argument(..., help="message content"),
    time_to_live: int = typer.Option(
        None,
        "--time-to-live",
        min=-1,
        help="Seconds the message is kept, -1 for no expiry (default: 7 days)",
    ),
):
    """
    Add a message to the back of a queue.
    """
    _run(
        ctx,
        QueuesOperation.SEND_MESSAGE,
        queue_name=queue_name,
        content=content,
        time_to_live=time_to_live,
    )


@app.command(operation_command_name(QueuesOperation.PEEK_MESSAGES))
def peek_messages(
    ctx: typer.Context,
    queue_name: str = typer.Argument(..., help="queue name"),
    max_messages: int = typer.Option(
        None, "--max-messages", min=1, max=32, help="Number of messages to peek"
    ),
):
    """
    Look at messages at the front of a queue without changing their visibility.
    """
    _run(
        ctx,
        QueuesOperation.PEEK_MESSAGES,
        queue_name=queue_name,
        max_messages=max_messages,
    )


@app.command(operation_command_name(QueuesOperation.RECEIVE_MESSAGES))
def receive_messages(
    ctx: typer.Context,
    queue_name: str = typer.Argument(..., help="queue name"),
    max_messages: int = typer.Option(
        None, "--max-messages", min=1, help="Maximum number of messages to receive"
    ),
):
    """
    Receive messages from the front of a queue.
    """
    _run(
        ctx,
        QueuesOperation.RECEIVE_MESSAGES,
        queue_name=queue_name,
        max_messages=max_messages,
    )


@app.command(operation_command_name(QueuesOperation.CLEAR_MESSAGES))
def clear_messages(
    ctx: typer.Context,
    queue_name: str = typer.Argument(..., help="queue name"),
):
    """
    Delete every message in a queue.
    """
    _run(ctx, QueuesOperation.CLEAR_MESSAGES, queue_name=queue_name)
