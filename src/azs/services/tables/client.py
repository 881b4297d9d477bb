from enum import StrEnum, auto
from typing import Any

from azure.data.tables import TableServiceClient

from azs.core.models import BaseServiceClient, storage_operation


class TablesOperation(StrEnum):
    LIST_TABLES = auto()
    CREATE_TABLE = auto()
    DELETE_TABLE = auto()
    LIST_ENTITIES = auto()
    QUERY_ENTITIES = auto()
    GET_ENTITY = auto()
    UPSERT_ENTITY = auto()
    DELETE_ENTITY = auto()


class TablesClient(BaseServiceClient):
    """
    Wrapper for TableServiceClient interactions.
    """

    endpoint = "table"

    @property
    def service_name(self) -> str:
        return "Tables"

    def create_client(self, url: str, credential: Any) -> TableServiceClient:
        return TableServiceClient(endpoint=url, credential=credential)

    def _table(self, table_name: str) -> Any:
        return self._client.get_table_client(table_name)

    @storage_operation
    def list_tables(self, query_filter: str | None = None) -> list[str]:
        # TableItem is not dict-like, only its name is useful here.
        if query_filter:
            tables = self._client.query_tables(query_filter)
        else:
            tables = self._client.list_tables()
        return [table.name for table in tables]

    @storage_operation
    def create_table(self, table_name: str) -> dict[str, str]:
        self._client.create_table(table_name)
        return {"table": table_name}

    @storage_operation
    def delete_table(self, table_name: str) -> None:
        self._client.delete_table(table_name)

    @storage_operation
    def list_entities(self, table_name: str) -> list[dict[str, Any]]:
        return list(self._table(table_name).list_entities())

    @storage_operation
    def query_entities(self, table_name: str, query_filter: str) -> list[dict]:
        return list(self._table(table_name).query_entities(query_filter))

    @storage_operation
    def get_entity(self, table_name: str, partition_key: str, row_key: str) -> dict:
        return self._table(table_name).get_entity(
            partition_key=partition_key, row_key=row_key
        )

    @storage_operation
    def upsert_entity(self, table_name: str, entity: dict[str, Any]) -> dict:
        return self._table(table_name).upsert_entity(entity)

    @storage_operation
    def delete_entity(self, table_name: str, partition_key: str, row_key: str) -> None:
        self._table(table_name).delete_entity(
            partition_key=partition_key, row_key=row_key
        )
