import logging
from collections.abc import Callable
from dataclasses import dataclass

from azure.core.credentials import AzureNamedKeyCredential, TokenCredential
from azure.identity import DefaultAzureCredential
from pydantic import SecretStr

from azs.core.errors import CredentialConfigurationError

logger = logging.getLogger(__name__)

AmbientIdentityProvider = Callable[[], TokenCredential]


@dataclass(frozen=True)
class KeyBased:
    """Shared key authentication bound to one storage account."""

    account: str
    secret: SecretStr

    def to_azure(self) -> AzureNamedKeyCredential:
        return AzureNamedKeyCredential(self.account, self.secret.get_secret_value())


@dataclass(frozen=True)
class IdentityBased:
    """
    Entra ID authentication through an ambient identity chain.

    The provider is only called when a service client is built, so selecting
    this strategy performs no I/O.
    """

    provider: AmbientIdentityProvider = DefaultAzureCredential

    def to_azure(self) -> TokenCredential:
        return self.provider()


ResolvedCredential = KeyBased | IdentityBased


def resolve_credential(
    secret: SecretStr | None,
    account: str,
    ambient_identity_provider: AmbientIdentityProvider = DefaultAzureCredential,
) -> ResolvedCredential:
    """
    Selects the authentication strategy for this run.

    An access key, when given, always wins; without one the ambient identity
    chain is used. There is no fallback between the two.
    """
    if secret is None:
        logger.debug("No access key configured, using ambient identity")
        return IdentityBased(provider=ambient_identity_provider)

    if not account:
        raise CredentialConfigurationError(
            "An account name is required when an access key is given"
        )

    logger.debug("Access key configured, using shared key authentication")
    return KeyBased(account=account, secret=secret)
