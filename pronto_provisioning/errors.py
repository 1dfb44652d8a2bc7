"""Errors raised while provisioning a pass."""

from __future__ import annotations

from enum import Enum


class ProvisioningErrorKind(str, Enum):
    NOT_CONFIGURED = "not_configured"
    WALLET_UNAVAILABLE = "wallet_unavailable"
    NETWORK = "network"
    SERVER = "server"
    INVALID_RESPONSE = "invalid_response"
    PLATFORM_UI = "platform_ui"


class ProvisioningError(Exception):
    """Base exception for every provisioning failure surfaced to the host."""

    kind: ProvisioningErrorKind
    default_message = "Provisioning failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def description(self) -> str:
        return str(self)


class NotConfiguredError(ProvisioningError):
    """Raised when provisioning is attempted before ``configure()``."""

    kind = ProvisioningErrorKind.NOT_CONFIGURED
    default_message = "Pronto provisioning SDK is not configured. Call configure() before provisioning."


class WalletUnavailableError(ProvisioningError):
    kind = ProvisioningErrorKind.WALLET_UNAVAILABLE
    default_message = "Wallet is not available on this device."


class NetworkError(ProvisioningError):
    """Transport-level failure (DNS, TLS, timeout, connection reset)."""

    kind = ProvisioningErrorKind.NETWORK

    def __init__(self, cause: BaseException):
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class ServerError(ProvisioningError):
    """Raised for non-2xx HTTP responses from the Pronto API."""

    kind = ProvisioningErrorKind.SERVER

    def __init__(self, status_code: int, message: str | None = None):
        if message is not None:
            text = f"Server error ({status_code}): {message}"
        else:
            text = f"Server error ({status_code})"
        super().__init__(text)
        self.status_code = status_code
        self.message = message


class InvalidResponseError(ProvisioningError):
    """The request could not be built or the response could not be decoded."""

    kind = ProvisioningErrorKind.INVALID_RESPONSE
    default_message = "Invalid response from server."


class PlatformUIError(ProvisioningError):
    """The wallet platform failed while presenting the binding UI."""

    kind = ProvisioningErrorKind.PLATFORM_UI

    def __init__(self, cause: BaseException):
        super().__init__(f"Wallet platform error: {cause}")
        self.cause = cause
