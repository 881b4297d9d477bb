"""
Dispatch of a resolved leaf command.

Every command family is one frozen variant below; dispatch() matches over the
closed set and builds the matching service client. Adding a family means
adding a variant, extending FamilyCommand and adding a case.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, assert_never

from azs.core.commands import CommandNode
from azs.core.credentials import ResolvedCredential
from azs.core.readme import ReadmeSettings, render_readme
from azs.core.settings import Invocation
from azs.services.blob.client import AccountClient, AccountOperation, ContainerOperation
from azs.services.datalake.client import DatalakeClient, DatalakeOperation
from azs.services.queues.client import QueuesClient, QueuesOperation
from azs.services.tables.client import TablesClient, TablesOperation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountCommand:
    operation: AccountOperation
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ContainerCommand:
    container_name: str
    operation: ContainerOperation
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class QueuesCommand:
    operation: QueuesOperation
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DatalakeCommand:
    operation: DatalakeOperation
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TablesCommand:
    operation: TablesOperation
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReadmeCommand:
    tree: CommandNode
    settings: ReadmeSettings = field(default_factory=ReadmeSettings)


FamilyCommand = (
    AccountCommand
    | ContainerCommand
    | QueuesCommand
    | DatalakeCommand
    | TablesCommand
    | ReadmeCommand
)


def _forward(client: Any, operation: Any, arguments: dict[str, Any]) -> Any:
    logger.debug("Forwarding to %s.%s", client.service_name, operation.value)
    return getattr(client, operation.value)(**arguments)


def dispatch(
    command: FamilyCommand, credential: ResolvedCredential, invocation: Invocation
) -> Any:
    """
    Runs exactly one operation for the selected leaf and returns its result.

    The readme command never builds a client, so it needs neither network
    access nor a usable credential. Errors from the Azure SDK propagate.
    """
    account = invocation.account
    suffix = invocation.endpoint_suffix

    match command:
        case ReadmeCommand(tree=tree, settings=settings):
            return render_readme(tree, settings)
        case AccountCommand(operation=operation, arguments=arguments):
            client = AccountClient(account, credential, suffix)
            return _forward(client, operation, arguments)
        case ContainerCommand(
            container_name=container_name, operation=operation, arguments=arguments
        ):
            client = AccountClient(account, credential, suffix).container(
                container_name
            )
            return _forward(client, operation, arguments)
        case QueuesCommand(operation=operation, arguments=arguments):
            client = QueuesClient(account, credential, suffix)
            return _forward(client, operation, arguments)
        case DatalakeCommand(operation=operation, arguments=arguments):
            client = DatalakeClient(account, credential, suffix)
            return _forward(client, operation, arguments)
        case TablesCommand(operation=operation, arguments=arguments):
            client = TablesClient(account, credential, suffix)
            return _forward(client, operation, arguments)
        case _:
            assert_never(command)
