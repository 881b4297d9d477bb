import pytest
from azure.core.exceptions import ResourceNotFoundError

from azs.core.dispatcher import (
    AccountCommand,
    ContainerCommand,
    DatalakeCommand,
    QueuesCommand,
    ReadmeCommand,
    TablesCommand,
    dispatch,
)
from azs.core.readme import ReadmeSettings
from azs.core.settings import Invocation
from azs.services.blob.client import (
    AccountClient,
    AccountOperation,
    BlobContainerClient,
    ContainerOperation,
)
from azs.services.datalake.client import DatalakeClient, DatalakeOperation
from azs.services.queues.client import QueuesClient, QueuesOperation
from azs.services.tables.client import TablesClient, TablesOperation


def is_storage_operation(client_cls, operation):
    """Leaf operations are client methods wrapped by storage_operation."""
    method = getattr(client_cls, operation.value, None)
    return callable(method) and hasattr(method, "__wrapped__")


@pytest.fixture
def clients(mocker):
    return {
        name: mocker.patch(f"azs.core.dispatcher.{name}")
        for name in ("AccountClient", "QueuesClient", "DatalakeClient", "TablesClient")
    }


def test_account_command(clients, key_credential, invocation):
    account_client = clients["AccountClient"].return_value
    account_client.get_account_information.return_value = {"sku_name": "Standard_LRS"}

    result = dispatch(
        AccountCommand(operation=AccountOperation.GET_ACCOUNT_INFORMATION),
        key_credential,
        invocation,
    )

    assert result == {"sku_name": "Standard_LRS"}
    clients["AccountClient"].assert_called_once_with(
        "acct1", key_credential, "core.windows.net"
    )
    account_client.get_account_information.assert_called_once_with()


def test_container_command_narrows_to_container(clients, key_credential, invocation):
    account_client = clients["AccountClient"].return_value
    container_client = account_client.container.return_value
    container_client.exists.return_value = True

    result = dispatch(
        ContainerCommand(container_name="c1", operation=ContainerOperation.EXISTS),
        key_credential,
        invocation,
    )

    assert result is True
    account_client.container.assert_called_once_with("c1")
    container_client.exists.assert_called_once_with()


def test_arguments_are_forwarded(clients, identity_credential, invocation):
    queues_client = clients["QueuesClient"].return_value

    dispatch(
        QueuesCommand(
            operation=QueuesOperation.SEND_MESSAGE,
            arguments={"queue_name": "q1", "content": "hi", "time_to_live": None},
        ),
        identity_credential,
        invocation,
    )

    clients["QueuesClient"].assert_called_once_with(
        "acct1", identity_credential, "core.windows.net"
    )
    queues_client.send_message.assert_called_once_with(
        queue_name="q1", content="hi", time_to_live=None
    )


def test_endpoint_suffix_is_passed(clients, identity_credential):
    invocation = Invocation(account="acct1", endpoint_suffix="core.chinacloudapi.cn")

    dispatch(
        TablesCommand(operation=TablesOperation.LIST_TABLES),
        identity_credential,
        invocation,
    )

    clients["TablesClient"].assert_called_once_with(
        "acct1", identity_credential, "core.chinacloudapi.cn"
    )


def test_datalake_command(clients, identity_credential, invocation):
    datalake_client = clients["DatalakeClient"].return_value
    datalake_client.list_file_systems.return_value = []

    dispatch(
        DatalakeCommand(
            operation=DatalakeOperation.LIST_FILE_SYSTEMS, arguments={"prefix": "raw"}
        ),
        identity_credential,
        invocation,
    )

    datalake_client.list_file_systems.assert_called_once_with(prefix="raw")


def test_readme_builds_no_client(mocker, clients, identity_credential, invocation):
    mock_render = mocker.patch(
        "azs.core.dispatcher.render_readme", return_value="# Azure Storage CLI\n"
    )
    settings = ReadmeSettings()
    command = ReadmeCommand(tree=mocker.sentinel.tree, settings=settings)

    result = dispatch(command, identity_credential, invocation)

    assert result == "# Azure Storage CLI\n"
    mock_render.assert_called_once_with(mocker.sentinel.tree, settings)
    for client_cls in clients.values():
        client_cls.assert_not_called()
    identity_credential.provider.assert_not_called()


def test_operation_errors_propagate(clients, key_credential, invocation):
    container_client = clients["AccountClient"].return_value.container.return_value
    container_client.delete.side_effect = ResourceNotFoundError("container missing")

    with pytest.raises(ResourceNotFoundError, match="container missing"):
        dispatch(
            ContainerCommand(container_name="c1", operation=ContainerOperation.DELETE),
            key_credential,
            invocation,
        )


@pytest.mark.parametrize(
    "client_cls, operations",
    [
        (AccountClient, AccountOperation),
        (BlobContainerClient, ContainerOperation),
        (QueuesClient, QueuesOperation),
        (DatalakeClient, DatalakeOperation),
        (TablesClient, TablesOperation),
    ],
)
def test_every_operation_has_a_client_method(client_cls, operations):
    missing = [op for op in operations if not is_storage_operation(client_cls, op)]
    assert missing == []
