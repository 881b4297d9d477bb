import pytest

from azs.services.datalake.client import DatalakeClient


@pytest.fixture
def mock_service_client(mocker):
    return mocker.patch("azs.services.datalake.client.DataLakeServiceClient")


@pytest.fixture
def datalake_client(mock_service_client, key_credential):
    return DatalakeClient("acct1", key_credential)


@pytest.fixture
def file_system_client(datalake_client):
    return datalake_client._client.get_file_system_client.return_value


def test_client_uses_dfs_endpoint(mock_service_client, datalake_client):
    kwargs = mock_service_client.call_args.kwargs
    assert kwargs["account_url"] == "https://acct1.dfs.core.windows.net"
    assert kwargs["credential"].named_key.name == "acct1"


def test_create_file_system(datalake_client):
    assert datalake_client.create_file_system("raw") == {"file_system": "raw"}
    datalake_client._client.create_file_system.assert_called_once_with("raw")


def test_list_paths(datalake_client, file_system_client):
    file_system_client.get_paths.return_value = iter([{"name": "2024/a.csv"}])

    paths = datalake_client.list_paths("raw", path="2024", recursive=False)

    assert paths == [{"name": "2024/a.csv"}]
    datalake_client._client.get_file_system_client.assert_called_once_with("raw")
    file_system_client.get_paths.assert_called_once_with(path="2024", recursive=False)


def test_create_directory(datalake_client, file_system_client):
    result = datalake_client.create_directory("raw", "2024/01")

    assert result == {"file_system": "raw", "path": "2024/01"}
    file_system_client.create_directory.assert_called_once_with("2024/01")


def test_upload_file(datalake_client, file_system_client, tmp_path):
    source = tmp_path / "a.csv"
    source.write_text("x,y\n")
    file_client = file_system_client.get_file_client.return_value

    result = datalake_client.upload_file("raw", "2024/a.csv", source)

    assert result == {"file_system": "raw", "path": "2024/a.csv"}
    file_system_client.get_file_client.assert_called_once_with("2024/a.csv")
    assert file_client.upload_data.call_args.kwargs == {"overwrite": False}


def test_download_file_to_stdout(datalake_client, file_system_client):
    file_client = file_system_client.get_file_client.return_value
    file_client.download_file.return_value.readall.return_value = b"x,y\n"

    assert datalake_client.download_file("raw", "2024/a.csv") == b"x,y\n"


def test_download_file_to_path(datalake_client, file_system_client, tmp_path):
    target = tmp_path / "a.csv"
    file_client = file_system_client.get_file_client.return_value
    file_client.download_file.return_value.readinto.return_value = 4

    result = datalake_client.download_file("raw", "2024/a.csv", output=target)

    assert result == {"file_system": "raw", "path": "2024/a.csv", "output": str(target)}
    assert target.exists()


def test_delete_file(datalake_client, file_system_client):
    datalake_client.delete_file("raw", "2024/a.csv")

    file_system_client.delete_file.assert_called_once_with("2024/a.csv")
