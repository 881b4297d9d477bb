from unittest import mock

from typer.testing import CliRunner

import azs.services.blob.cli.account as account_module
import azs.services.blob.cli.container as container_module
from azs.core.dispatcher import AccountCommand, ContainerCommand
from azs.services.blob.cli import account_app, container_app
from azs.services.blob.client import AccountOperation, ContainerOperation

runner = CliRunner()


def sent_command(mock_run_command):
    ctx, command = mock_run_command.call_args.args
    return command


@mock.patch.object(account_module, "run_command", return_value=0)
def test_account_info(mock_run_command):
    result = runner.invoke(account_app, ["info"])

    assert result.exit_code == 0
    assert sent_command(mock_run_command) == AccountCommand(
        operation=AccountOperation.GET_ACCOUNT_INFORMATION
    )


@mock.patch.object(account_module, "run_command", return_value=0)
def test_account_properties_and_stats(mock_run_command):
    runner.invoke(account_app, ["properties"])
    assert (
        sent_command(mock_run_command).operation
        == AccountOperation.GET_SERVICE_PROPERTIES
    )

    runner.invoke(account_app, ["stats"])
    assert sent_command(mock_run_command).operation == AccountOperation.GET_SERVICE_STATS


@mock.patch.object(account_module, "run_command", return_value=0)
def test_list_containers_prefix(mock_run_command):
    result = runner.invoke(account_app, ["list-containers", "--prefix", "logs"])

    assert result.exit_code == 0
    command = sent_command(mock_run_command)
    assert command.operation == AccountOperation.LIST_CONTAINERS
    assert command.arguments == {"prefix": "logs"}


@mock.patch.object(account_module, "run_command", return_value=0)
def test_find_blobs_by_tags(mock_run_command):
    result = runner.invoke(account_app, ["find-blobs-by-tags", "\"env\" = 'dev'"])

    assert result.exit_code == 0
    assert sent_command(mock_run_command).arguments == {
        "filter_expression": "\"env\" = 'dev'"
    }


@mock.patch.object(account_module, "run_command", return_value=1)
def test_account_failure_exit_code(mock_run_command):
    result = runner.invoke(account_app, ["info"])

    assert result.exit_code == 1


@mock.patch.object(container_module, "run_command", return_value=0)
def test_container_exists(mock_run_command):
    result = runner.invoke(container_app, ["c1", "exists"])

    assert result.exit_code == 0
    assert sent_command(mock_run_command) == ContainerCommand(
        container_name="c1", operation=ContainerOperation.EXISTS
    )


@mock.patch.object(container_module, "run_command", return_value=0)
def test_container_blob_command(mock_run_command):
    result = runner.invoke(container_app, ["c1", "blob-tags", "a.txt"])

    assert result.exit_code == 0
    command = sent_command(mock_run_command)
    assert command.container_name == "c1"
    assert command.operation == ContainerOperation.BLOB_TAGS
    assert command.arguments == {"blob_name": "a.txt"}


@mock.patch.object(container_module, "run_command", return_value=0)
def test_upload_blob(mock_run_command, tmp_path):
    source = tmp_path / "a.txt"
    source.write_text("hello")

    result = runner.invoke(
        container_app, ["c1", "upload-blob", "a.txt", str(source), "--overwrite"]
    )

    assert result.exit_code == 0
    assert sent_command(mock_run_command).arguments == {
        "blob_name": "a.txt",
        "file": source,
        "overwrite": True,
    }


@mock.patch.object(container_module, "run_command")
def test_upload_blob_missing_file_is_a_usage_error(mock_run_command, tmp_path):
    result = runner.invoke(
        container_app, ["c1", "upload-blob", "a.txt", str(tmp_path / "missing.txt")]
    )

    assert result.exit_code == 2
    mock_run_command.assert_not_called()


@mock.patch.object(container_module, "run_command", return_value=0)
def test_download_blob_defaults_to_stdout(mock_run_command):
    result = runner.invoke(container_app, ["c1", "download-blob", "a.txt"])

    assert result.exit_code == 0
    assert sent_command(mock_run_command).arguments == {
        "blob_name": "a.txt",
        "output": None,
    }


@mock.patch.object(container_module, "run_command")
def test_container_requires_subcommand(mock_run_command):
    result = runner.invoke(container_app, ["c1"])

    assert result.exit_code == 2
    mock_run_command.assert_not_called()
