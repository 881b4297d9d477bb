from types import MappingProxyType

import pytest
from pydantic import SecretStr

from azs.core.commands import CommandNode
from azs.core.credentials import IdentityBased, KeyBased
from azs.core.settings import Invocation


@pytest.fixture(autouse=True)
def clean_storage_env(monkeypatch):
    """Keep developer shell settings from leaking into CLI tests."""
    for name in ("STORAGE_ACCOUNT", "STORAGE_ACCESS_KEY", "STORAGE_ENDPOINT_SUFFIX"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def invocation():
    return Invocation(account="acct1")


@pytest.fixture
def key_credential():
    return KeyBased(account="acct1", secret=SecretStr("s3cr3t-key"))


@pytest.fixture
def identity_credential(mocker):
    return IdentityBased(provider=mocker.Mock(name="ambient_identity"))


def node(name, *children, positionals=(), hidden=False):
    return CommandNode(
        name=name,
        usage=f"Usage: {name} [OPTIONS]",
        positionals=tuple(positionals),
        children=MappingProxyType({child.name: child for child in children}),
        is_hidden=hidden,
    )


@pytest.fixture
def sample_tree():
    """
    azure-storage-cli
    ├── readme (hidden)
    ├── account
    │   └── info
    └── container <CONTAINER_NAME>
        ├── exists
        └── upload-blob <BLOB_NAME> <FILE>
    """
    return node(
        "azure-storage-cli",
        node("readme", hidden=True),
        node("account", node("info")),
        node(
            "container",
            node("exists"),
            node("upload-blob", positionals=("blob_name", "file")),
            positionals=("container_name",),
        ),
    )


@pytest.fixture
def make_node():
    return node
