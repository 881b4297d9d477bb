import json
from typing import Any

import typer

from azs.core.dispatcher import TablesCommand
from azs.core.models import operation_command_name
from azs.core.runner import run_command
from azs.services.tables.client import TablesOperation

app = typer.Typer(help="Interact with data tables", rich_markup_mode=None)

REQUIRED_ENTITY_KEYS = ("PartitionKey", "RowKey")


def _run(ctx: typer.Context, operation: TablesOperation, **arguments):
    exit_code = run_command(ctx, TablesCommand(operation=operation, arguments=arguments))
    if exit_code != 0:
        raise typer.Exit(exit_code)


def parse_entity(value: str) -> dict[str, Any]:
    """
    Parses an entity given as a JSON object on the command line.
    """
    try:
        entity = json.loads(value)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"not valid JSON: {e}") from e

    if not isinstance(entity, dict):
        raise typer.BadParameter("the entity must be a JSON object")

    missing = [key for key in REQUIRED_ENTITY_KEYS if key not in entity]
    if missing:
        raise typer.BadParameter(f"missing required keys: {', '.join(missing)}")
    return entity


def create_table_command(operation: TablesOperation, command_help_text: str):
    def command(
        ctx: typer.Context,
        table_name: str = typer.Argument(..., help="table name"),
    ):
        _run(ctx, operation, table_name=table_name)

    command.__doc__ = command_help_text
    return command


def create_entity_command(operation: TablesOperation, command_help_text: str):
    def command(
        ctx: typer.Context,
        table_name: str = typer.Argument(..., help="table name"),
        partition_key: str = typer.Argument(..., help="partition key"),
        row_key: str = typer.Argument(..., help="row key"),
    ):
        _run(
            ctx,
            operation,
            table_name=table_name,
            partition_key=partition_key,
            row_key=row_key,
        )

    command.__doc__ = command_help_text
    return command


@app.command(operation_command_name(TablesOperation.LIST_TABLES))
def list_tables(
    ctx: typer.Context,
    query_filter: str = typer.Option(
        None, "--filter", help="OData filter on table names, e.g. \"TableName eq 'x'\""
    ),
):
    """
    List the tables in the storage account.
    """
    _run(ctx, TablesOperation.LIST_TABLES, query_filter=query_filter)


TABLE_HELP_TEXT_MAP = {
    TablesOperation.CREATE_TABLE: "Create a table",
    TablesOperation.DELETE_TABLE: "Delete a table and all of its entities",
    TablesOperation.LIST_ENTITIES: "List every entity in a table",
}

for operation, help_text in TABLE_HELP_TEXT_MAP.items():
    app.command(operation_command_name(operation))(
        create_table_command(operation, help_text)
    )


@app.command(operation_command_name(TablesOperation.QUERY_ENTITIES))
def query_entities(
    ctx: typer.Context,
    table_name: str = typer.Argument(..., help="table name"),
    query_filter: str = typer.Argument(
        ..., help="OData filter, e.g. \"PartitionKey eq 'p1'\""
    ),
):
    """
    List the entities of a table matching a filter.
    """
    _run(
        ctx,
        TablesOperation.QUERY_ENTITIES,
        table_name=table_name,
        query_filter=query_filter,
    )


app.command(operation_command_name(TablesOperation.GET_ENTITY))(
    create_entity_command(TablesOperation.GET_ENTITY, "Get a single entity")
)


@app.command(operation_command_name(TablesOperation.UPSERT_ENTITY))
def upsert_entity(
    ctx: typer.Context,
    table_name: str = typer.Argument(..., help="table name"),
    entity: str = typer.Argument(
        ...,
        help="entity as a JSON object including PartitionKey and RowKey",
    ),
):
    """
    Insert an entity, or merge it into the existing one with the same keys.
    """
    _run(
        ctx,
        TablesOperation.UPSERT_ENTITY,
        table_name=table_name,
        entity=parse_entity(entity),
    )


app.command(operation_command_name(TablesOperation.DELETE_ENTITY))(
    create_entity_command(TablesOperation.DELETE_ENTITY, "Delete a single entity")
)
