import logging
import os
import tempfile
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import StrEnum
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

from azure.core.exceptions import AzureError

from azs.core.credentials import ResolvedCredential
from azs.core.settings import DEFAULT_ENDPOINT_SUFFIX, account_url

logger = logging.getLogger(__name__)

T = TypeVar("T")


def storage_operation(func: Callable[..., T]) -> Callable[..., T]:
    """
    Marks a client method as the target of a leaf command.

    Azure errors are logged at debug level and re-raised untouched; the runner
    decides how they are reported.
    """

    @wraps(func)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
        service = getattr(self, "service_name", type(self).__name__)
        logger.debug("Calling %s.%s", service, func.__name__)
        try:
            return func(self, *args, **kwargs)
        except AzureError as e:
            logger.debug(
                "Azure error in %s.%s: %s", service, func.__name__, type(e).__name__
            )
            raise

    return wrapper


def operation_command_name(operation: StrEnum) -> str:
    return operation.value.replace("_", "-")


def write_download(downloader: Any, output: Path) -> int:
    """
    Streams a download into output and returns the number of bytes written.

    The data goes to a temporary file next to output, which replaces output
    only once the download completed. A failed download leaves an existing
    file untouched.
    """
    output = Path(output)
    handle = tempfile.NamedTemporaryFile(
        dir=output.parent, prefix=f".{output.name}.", suffix=".part", delete=False
    )
    try:
        with handle:
            size = downloader.readinto(handle)
        os.replace(handle.name, output)
    except BaseException:
        Path(handle.name).unlink(missing_ok=True)
        raise
    return size


class BaseServiceClient(ABC):
    """
    Abstract base class for the per-family service clients.

    Subclasses name the endpoint kind and build the matching Azure SDK client;
    the base class owns the account URL and credential handling.
    """

    endpoint: str = "blob"

    def __init__(
        self,
        account: str,
        credential: ResolvedCredential,
        endpoint_suffix: str = DEFAULT_ENDPOINT_SUFFIX,
    ):
        self.account = account
        self.credential = credential
        self.account_url = account_url(account, self.endpoint, endpoint_suffix)
        self._client = self.create_client(self.account_url, credential.to_azure())

    @property
    @abstractmethod
    def service_name(self) -> str:
        pass

    @abstractmethod
    def create_client(self, url: str, credential: Any) -> Any:
        pass
