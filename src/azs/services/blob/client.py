import logging
from enum import StrEnum, auto
from pathlib import Path
from typing import Any

from azure.storage.blob import BlobServiceClient, ContainerClient

from azs.core.models import BaseServiceClient, storage_operation, write_download

logger = logging.getLogger(__name__)


class AccountOperation(StrEnum):
    GET_ACCOUNT_INFORMATION = auto()
    GET_SERVICE_PROPERTIES = auto()
    GET_SERVICE_STATS = auto()
    LIST_CONTAINERS = auto()
    FIND_BLOBS_BY_TAGS = auto()


class ContainerOperation(StrEnum):
    CREATE = auto()
    DELETE = auto()
    EXISTS = auto()
    PROPERTIES = auto()
    LIST_BLOBS = auto()
    UPLOAD_BLOB = auto()
    DOWNLOAD_BLOB = auto()
    DELETE_BLOB = auto()
    BLOB_PROPERTIES = auto()
    BLOB_TAGS = auto()


class AccountClient(BaseServiceClient):
    """
    Wrapper for BlobServiceClient account level interactions.
    """

    endpoint = "blob"

    @property
    def service_name(self) -> str:
        return "Blob Account"

    def create_client(self, url: str, credential: Any) -> BlobServiceClient:
        return BlobServiceClient(account_url=url, credential=credential)

    def container(self, container_name: str) -> "BlobContainerClient":
        return BlobContainerClient(self._client.get_container_client(container_name))

    @storage_operation
    def get_account_information(self) -> dict[str, Any]:
        return self._client.get_account_information()

    @storage_operation
    def get_service_properties(self) -> dict[str, Any]:
        return self._client.get_service_properties()

    @storage_operation
    def get_service_stats(self) -> dict[str, Any]:
        """
        Geo-replication stats. Only available on the secondary endpoint of
        RA-GRS accounts; other accounts get an error from the service.
        """
        return self._client.get_service_stats()

    @storage_operation
    def list_containers(self, prefix: str | None = None) -> list[Any]:
        return list(self._client.list_containers(name_starts_with=prefix))

    @storage_operation
    def find_blobs_by_tags(self, filter_expression: str) -> list[Any]:
        return list(self._client.find_blobs_by_tags(filter_expression))


class BlobContainerClient:
    """
    Wrapper for a ContainerClient narrowed to a single container.
    """

    def __init__(self, container_client: ContainerClient):
        self._client = container_client

    @property
    def service_name(self) -> str:
        return "Blob Container"

    @property
    def container_name(self) -> str:
        return self._client.container_name

    @storage_operation
    def create(self) -> dict[str, Any]:
        return self._client.create_container()

    @storage_operation
    def delete(self) -> None:
        self._client.delete_container()

    @storage_operation
    def exists(self) -> bool:
        return self._client.exists()

    @storage_operation
    def properties(self) -> Any:
        return self._client.get_container_properties()

    @storage_operation
    def list_blobs(self, prefix: str | None = None) -> list[Any]:
        return list(self._client.list_blobs(name_starts_with=prefix))

    @storage_operation
    def upload_blob(
        self, blob_name: str, file: Path, overwrite: bool = False
    ) -> dict[str, Any]:
        with open(file, "rb") as data:
            blob_client = self._client.upload_blob(blob_name, data, overwrite=overwrite)
        return {"container": self.container_name, "blob": blob_client.blob_name}

    @storage_operation
    def download_blob(self, blob_name: str, output: Path | None = None) -> Any:
        """
        Downloads a blob. Without an output path the content is returned so it
        can be written to stdout.
        """
        downloader = self._client.download_blob(blob_name)
        if output is None:
            return downloader.readall()

        size = write_download(downloader, output)
        logger.debug("Wrote %d bytes to %s", size, output)
        return {"blob": blob_name, "path": str(output), "size": size}

    @storage_operation
    def delete_blob(self, blob_name: str) -> None:
        self._client.delete_blob(blob_name)

    @storage_operation
    def blob_properties(self, blob_name: str) -> Any:
        return self._client.get_blob_client(blob_name).get_blob_properties()

    @storage_operation
    def blob_tags(self, blob_name: str) -> dict[str, str]:
        return self._client.get_blob_client(blob_name).get_blob_tags()
