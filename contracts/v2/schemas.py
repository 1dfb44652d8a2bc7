"""Pydantic contracts for the Pronto v2 in-app provisioning API."""

from pydantic import BaseModel, ConfigDict


class _StrictModel(BaseModel):
    """Base model for request payloads; rejects unknown fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class _ResponseModel(BaseModel):
    """Base model for server payloads.

    Unknown keys are ignored so the server can grow its responses, but values
    are validated strictly: ``"42"`` is not an integer and ``"true"`` is not a
    boolean.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)


class IssuerDataRequest(_StrictModel):
    tag_id: str
    id_attribute: str


class IssuerDataResponse(_ResponseModel):
    issuer_data: str
    signature: str
    tag_id: int


class PassAttributes(_ResponseModel):
    active: bool
    download_url: str
    download_url_apple: str | None = None
    download_url_google: str | None = None


class PassResource(_ResponseModel):
    id: str
    type: str
    attributes: PassAttributes


class PassesResponse(_ResponseModel):
    data: list[PassResource]


class ErrorResponse(_ResponseModel):
    error: str | None = None
    message: str | None = None

    def surfaced_message(self) -> str | None:
        """Return ``error`` when present, else ``message``."""
        return self.error if self.error is not None else self.message
