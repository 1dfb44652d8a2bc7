"""Mapping helpers between v2 wire contracts and SDK result models."""

from __future__ import annotations

from contracts.v2.schemas import IssuerDataResponse, PassesResponse, PassResource

from .models import IssuerDataResult, Pass


def issuer_data_from_contract(contract: IssuerDataResponse) -> IssuerDataResult:
    """Convert an ``IssuerDataResponse`` to an ``IssuerDataResult``."""
    return IssuerDataResult(
        issuer_data_base64=contract.issuer_data,
        signature_base64=contract.signature,
        tag_id=contract.tag_id,
    )


def pass_from_resource(resource: PassResource) -> Pass:
    attributes = resource.attributes
    return Pass(
        id=resource.id,
        active=attributes.active,
        download_url=attributes.download_url,
        download_url_apple=attributes.download_url_apple,
        download_url_google=attributes.download_url_google,
    )


def passes_from_contract(contract: PassesResponse) -> list[Pass]:
    """Flatten a JSON:API pass envelope into ``Pass`` values, in order."""
    return [pass_from_resource(resource) for resource in contract.data]
