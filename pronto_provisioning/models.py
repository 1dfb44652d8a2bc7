"""Typed results returned to the host application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TagIdAttribute(str, Enum):
    """The attribute used to identify a tag when requesting provisioning."""

    REFERENCE_ID = "reference_id"
    PRONTO_TAG_ID = "pronto_tag_id"
    SUBSCRIPTION_ID = "subscription_id"


class ProvisioningState(str, Enum):
    IDLE = "idle"
    AWAITING_ISSUER_DATA = "awaiting_issuer_data"
    PRESENTING = "presenting"


class ProvisioningOutcome(str, Enum):
    """Successful terminal values of a provisioning attempt."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class IssuerDataResult:
    """Issuer data and signature for one tag, both still base64-encoded."""

    issuer_data_base64: str
    signature_base64: str
    tag_id: int


@dataclass(frozen=True)
class Pass:
    """A user's pass fetched from the Pronto API."""

    id: str
    active: bool
    download_url: str
    download_url_apple: str | None = None
    download_url_google: str | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "active": self.active,
            "download_url": self.download_url,
            "download_url_apple": self.download_url_apple,
            "download_url_google": self.download_url_google,
        }
