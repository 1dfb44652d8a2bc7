"""Pure construction of authenticated Pronto API requests."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from urllib import request
from urllib.parse import quote

from contracts.v2.schemas import IssuerDataRequest

from .configuration import ProntoConfiguration
from .models import TagIdAttribute

ISSUER_DATA_PATH = "/api/v2/in_app_provisioning/issuer_data"
PASSES_PATH_TEMPLATE = "/api/v2/users/{user_id}/passes"

JSON_MEDIA_TYPE = "application/json"


@dataclass
class ApiRequest:
    """An HTTP request ready to send; header names are kept verbatim."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float = 30.0

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None

    def to_urllib(self) -> request.Request:
        return request.Request(
            self.url,
            data=self.body,
            headers=dict(self.headers),
            method=self.method,
        )


def basic_auth_header(api_key: str) -> str:
    """HTTP Basic credential with the API key as user and an empty password."""
    credentials = f"{api_key}:".encode("utf-8")
    return f"Basic {base64.b64encode(credentials).decode('ascii')}"


def _endpoint(config: ProntoConfiguration, path: str) -> str:
    return f"{config.environment.base_url.rstrip('/')}{path}"


def build_issuer_data_request(
    config: ProntoConfiguration,
    tag_id: str | int,
    id_attribute: TagIdAttribute | str = TagIdAttribute.REFERENCE_ID,
) -> ApiRequest:
    """Build ``POST /api/v2/in_app_provisioning/issuer_data``.

    Numeric tag ids are sent in their string form. An unknown ``id_attribute``
    raises ``ValueError``.
    """
    attribute = TagIdAttribute(id_attribute)
    payload = IssuerDataRequest(tag_id=str(tag_id), id_attribute=attribute.value)
    return ApiRequest(
        method="POST",
        url=_endpoint(config, ISSUER_DATA_PATH),
        headers={
            "Content-Type": JSON_MEDIA_TYPE,
            "Accept": JSON_MEDIA_TYPE,
            "Authorization": basic_auth_header(config.api_key),
        },
        body=payload.model_dump_json().encode("utf-8"),
        timeout=config.timeout_seconds,
    )


def build_passes_request(config: ProntoConfiguration, user_id: str | int) -> ApiRequest:
    """Build ``GET /api/v2/users/{user_id}/passes`` (no body, no Content-Type)."""
    path = PASSES_PATH_TEMPLATE.format(user_id=quote(str(user_id), safe=""))
    return ApiRequest(
        method="GET",
        url=_endpoint(config, path),
        headers={
            "Accept": JSON_MEDIA_TYPE,
            "Authorization": basic_auth_header(config.api_key),
        },
        timeout=config.timeout_seconds,
    )
