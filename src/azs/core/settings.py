from pydantic import BaseModel, ConfigDict, Field, SecretStr

ACCOUNT_ENV_VAR = "STORAGE_ACCOUNT"
ACCESS_KEY_ENV_VAR = "STORAGE_ACCESS_KEY"
ENDPOINT_SUFFIX_ENV_VAR = "STORAGE_ENDPOINT_SUFFIX"

DEFAULT_ENDPOINT_SUFFIX = "core.windows.net"


class Invocation(BaseModel):
    """
    Global options shared by every leaf command.

    Built once by the root callback and stored on the Click context object.
    The access key is a SecretStr so it never shows up in reprs or logs.
    """

    model_config = ConfigDict(frozen=True)

    account: str = Field(min_length=1)
    access_key: SecretStr | None = None
    endpoint_suffix: str = Field(default=DEFAULT_ENDPOINT_SUFFIX, min_length=1)
    verbose: bool = False


def account_url(account: str, service: str, endpoint_suffix: str) -> str:
    """
    Builds the service endpoint for a storage account.

    Args:
        account: Storage account name.
        service: Endpoint kind ("blob", "queue", "dfs" or "table").
        endpoint_suffix: DNS suffix of the cloud, e.g. core.windows.net.
    """
    return f"https://{account}.{service}.{endpoint_suffix}"
