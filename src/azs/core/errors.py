class StorageCliError(Exception):
    """Base class for errors raised by azs itself (not by the Azure SDK)."""


class CredentialConfigurationError(StorageCliError):
    """The account name or access key cannot be used to build a credential."""


class CommandNotFoundError(StorageCliError):
    """The given tokens do not resolve to a leaf of the command tree."""

    def __init__(self, tokens: list[str], reason: str):
        self.tokens = tokens
        self.reason = reason
        super().__init__(f"{reason}: {' '.join(tokens) or '<empty>'}")
