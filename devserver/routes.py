"""
REST API routes mirroring the Pronto v2 provisioning endpoints.
"""

import base64
import binascii
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from contracts.v2.schemas import IssuerDataRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v2")

VALID_ID_ATTRIBUTES = {"reference_id", "pronto_tag_id", "subscription_id"}


def _api_key_from_header(header: str | None) -> str | None:
    if not header or not header.startswith("Basic "):
        return None
    try:
        decoded = base64.b64decode(header[len("Basic "):], validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    user, sep, _password = decoded.partition(":")
    return user if sep else None


def require_api_key(request: Request) -> str:
    """Reject requests whose Basic credential does not carry the server key."""
    api_key = _api_key_from_header(request.headers.get("authorization"))
    if api_key is None or api_key != request.app.state.api_key:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return api_key


@router.post("/in_app_provisioning/issuer_data")
async def issuer_data(
    req: IssuerDataRequest,
    request: Request,
    _api_key: str = Depends(require_api_key),
):
    """Return base64 issuer data and signature for a tag."""
    if req.id_attribute not in VALID_ID_ATTRIBUTES:
        raise HTTPException(status_code=422, detail=f"Unknown id_attribute '{req.id_attribute}'")

    record = request.app.state.store.find_tag(req.tag_id, req.id_attribute)
    if record is None:
        logger.info("No tag for %s=%s", req.id_attribute, req.tag_id)
        raise HTTPException(status_code=404, detail="Not Found")
    return record.to_payload()


@router.get("/users/{user_id}/passes")
async def user_passes(
    user_id: str,
    request: Request,
    _api_key: str = Depends(require_api_key),
):
    """Return the user's passes as a JSON:API ``data`` array."""
    passes = request.app.state.store.passes_for(user_id)
    if passes is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return {"data": [p.to_resource() for p in passes]}
