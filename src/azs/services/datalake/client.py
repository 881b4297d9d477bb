import logging
from enum import StrEnum, auto
from pathlib import Path
from typing import Any

from azure.storage.filedatalake import DataLakeServiceClient

from azs.core.models import BaseServiceClient, storage_operation, write_download

logger = logging.getLogger(__name__)


class DatalakeOperation(StrEnum):
    LIST_FILE_SYSTEMS = auto()
    CREATE_FILE_SYSTEM = auto()
    DELETE_FILE_SYSTEM = auto()
    LIST_PATHS = auto()
    CREATE_DIRECTORY = auto()
    DELETE_DIRECTORY = auto()
    UPLOAD_FILE = auto()
    DOWNLOAD_FILE = auto()
    DELETE_FILE = auto()


class DatalakeClient(BaseServiceClient):
    """
    Wrapper for DataLakeServiceClient (ADLS Gen2) interactions.
    """

    endpoint = "dfs"

    @property
    def service_name(self) -> str:
        return "Datalake"

    def create_client(self, url: str, credential: Any) -> DataLakeServiceClient:
        return DataLakeServiceClient(account_url=url, credential=credential)

    def _file_system(self, file_system: str) -> Any:
        return self._client.get_file_system_client(file_system)

    @storage_operation
    def list_file_systems(self, prefix: str | None = None) -> list[Any]:
        return list(self._client.list_file_systems(name_starts_with=prefix))

    @storage_operation
    def create_file_system(self, file_system: str) -> dict[str, str]:
        self._client.create_file_system(file_system)
        return {"file_system": file_system}

    @storage_operation
    def delete_file_system(self, file_system: str) -> None:
        self._client.delete_file_system(file_system)

    @storage_operation
    def list_paths(
        self, file_system: str, path: str | None = None, recursive: bool = True
    ) -> list[Any]:
        paths = self._file_system(file_system).get_paths(path=path, recursive=recursive)
        return list(paths)

    @storage_operation
    def create_directory(self, file_system: str, path: str) -> dict[str, str]:
        self._file_system(file_system).create_directory(path)
        return {"file_system": file_system, "path": path}

    @storage_operation
    def delete_directory(self, file_system: str, path: str) -> None:
        self._file_system(file_system).delete_directory(path)

    @storage_operation
    def upload_file(
        self, file_system: str, path: str, file: Path, overwrite: bool = False
    ) -> dict[str, str]:
        file_client = self._file_system(file_system).get_file_client(path)
        with open(file, "rb") as data:
            file_client.upload_data(data, overwrite=overwrite)
        return {"file_system": file_system, "path": path}

    @storage_operation
    def download_file(
        self, file_system: str, path: str, output: Path | None = None
    ) -> Any:
        downloader = self._file_system(file_system).get_file_client(path).download_file()
        if output is None:
            return downloader.readall()

        size = write_download(downloader, output)
        logger.debug("Wrote %d bytes to %s", size, output)
        return {"file_system": file_system, "path": path, "output": str(output)}

    @storage_operation
    def delete_file(self, file_system: str, path: str) -> None:
        self._file_system(file_system).delete_file(path)
