"""Client SDK for provisioning Pronto passes into a device wallet."""

__version__ = "1.0.0"

from .api_client import ProntoAPIClient
from .configuration import ProntoConfiguration
from .environment import EnvironmentKind, ProntoEnvironment, resolve_base_url
from .errors import (
    InvalidResponseError,
    NetworkError,
    NotConfiguredError,
    PlatformUIError,
    ProvisioningError,
    ProvisioningErrorKind,
    ServerError,
    WalletUnavailableError,
)
from .models import (
    IssuerDataResult,
    Pass,
    ProvisioningOutcome,
    ProvisioningState,
    TagIdAttribute,
)
from .request_builder import (
    ApiRequest,
    basic_auth_header,
    build_issuer_data_request,
    build_passes_request,
)
from .session import ProvisioningAttempt, ProvisioningSession
from .wallet import ProvisioningDelegate, WalletPlatform

__all__ = [
    "__version__",
    "ApiRequest",
    "EnvironmentKind",
    "InvalidResponseError",
    "IssuerDataResult",
    "NetworkError",
    "NotConfiguredError",
    "Pass",
    "PlatformUIError",
    "ProntoAPIClient",
    "ProntoConfiguration",
    "ProntoEnvironment",
    "ProvisioningAttempt",
    "ProvisioningDelegate",
    "ProvisioningError",
    "ProvisioningErrorKind",
    "ProvisioningOutcome",
    "ProvisioningSession",
    "ProvisioningState",
    "ServerError",
    "TagIdAttribute",
    "WalletPlatform",
    "WalletUnavailableError",
    "basic_auth_header",
    "build_issuer_data_request",
    "build_passes_request",
    "resolve_base_url",
]
