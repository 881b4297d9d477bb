from enum import StrEnum, auto
from typing import Any

from azure.storage.queue import QueueServiceClient

from azs.core.models import BaseServiceClient, storage_operation


class QueuesOperation(StrEnum):
    LIST_QUEUES = auto()
    CREATE_QUEUE = auto()
    DELETE_QUEUE = auto()
    QUEUE_PROPERTIES = auto()
    SEND_MESSAGE = auto()
    PEEK_MESSAGES = auto()
    RECEIVE_MESSAGES = auto()
    CLEAR_MESSAGES = auto()


class QueuesClient(BaseServiceClient):
    """
    Wrapper for QueueServiceClient interactions.
    """

    endpoint = "queue"

    @property
    def service_name(self) -> str:
        return "Queues"

    def create_client(self, url: str, credential: Any) -> QueueServiceClient:
        return QueueServiceClient(account_url=url, credential=credential)

    @storage_operation
    def list_queues(self, prefix: str | None = None) -> list[Any]:
        return list(self._client.list_queues(name_starts_with=prefix))

    @storage_operation
    def create_queue(self, queue_name: str) -> dict[str, str]:
        queue_client = self._client.create_queue(queue_name)
        return {"queue": queue_name, "url": queue_client.url}

    @storage_operation
    def delete_queue(self, queue_name: str) -> None:
        self._client.delete_queue(queue_name)

    @storage_operation
    def queue_properties(self, queue_name: str) -> Any:
        return self._client.get_queue_client(queue_name).get_queue_properties()

    @storage_operation
    def send_message(
        self, queue_name: str, content: str, time_to_live: int | None = None
    ) -> Any:
        return self._client.get_queue_client(queue_name).send_message(
            content, time_to_live=time_to_live
        )

    @storage_operation
    def peek_messages(self, queue_name: str, max_messages: int | None = None) -> list:
        return self._client.get_queue_client(queue_name).peek_messages(
            max_messages=max_messages
        )

    @storage_operation
    def receive_messages(
        self, queue_name: str, max_messages: int | None = None
    ) -> list[Any]:
        """
        Receives messages, making them invisible to other consumers until
        their visibility timeout expires. Messages are not deleted.
        """
        messages = self._client.get_queue_client(queue_name).receive_messages(
            max_messages=max_messages
        )
        return list(messages)

    @storage_operation
    def clear_messages(self, queue_name: str) -> None:
        self._client.get_queue_client(queue_name).clear_messages()
