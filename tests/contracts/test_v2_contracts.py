"""Tests for v2 wire contracts."""

import json

import pytest
from pydantic import ValidationError

from contracts.v2.schemas import (
    ErrorResponse,
    IssuerDataRequest,
    IssuerDataResponse,
    PassesResponse,
)
from pronto_provisioning.mappers import issuer_data_from_contract, passes_from_contract


def _envelope(attributes: dict, **resource) -> str:
    return json.dumps(
        {"data": [{"id": "ref-001", "type": "pass", "attributes": attributes, **resource}]}
    )


class TestIssuerDataResponse:

    def test_decodes_snake_case_keys(self):
        contract = IssuerDataResponse.model_validate_json(
            '{"issuer_data":"aXNzdWVyRGF0YQ==","signature":"c2lnbmF0dXJl","tag_id":42}'
        )
        result = issuer_data_from_contract(contract)
        assert result.issuer_data_base64 == "aXNzdWVyRGF0YQ=="
        assert result.signature_base64 == "c2lnbmF0dXJl"
        assert result.tag_id == 42

    def test_rejects_string_tag_id(self):
        with pytest.raises(ValidationError):
            IssuerDataResponse.model_validate_json(
                '{"issuer_data":"a","signature":"b","tag_id":"42"}'
            )


class TestPassesResponse:

    def test_decodes_populated_urls(self):
        contract = PassesResponse.model_validate_json(
            _envelope(
                {
                    "active": True,
                    "download_url": "https://example.com/pass.pkpass",
                    "download_url_apple": "https://example.com/apple.pkpass",
                    "download_url_google": "https://example.com/google",
                }
            )
        )
        [p] = passes_from_contract(contract)
        assert p.id == "ref-001"
        assert p.active is True
        assert p.download_url_apple == "https://example.com/apple.pkpass"
        assert p.download_url_google == "https://example.com/google"

    def test_null_platform_urls(self):
        contract = PassesResponse.model_validate_json(
            _envelope(
                {
                    "active": False,
                    "download_url": "https://example.com/pass.pkpass",
                    "download_url_apple": None,
                    "download_url_google": None,
                }
            )
        )
        [p] = passes_from_contract(contract)
        assert p.active is False
        assert p.download_url_apple is None
        assert p.download_url_google is None

    def test_missing_platform_urls(self):
        contract = PassesResponse.model_validate_json(
            _envelope({"active": True, "download_url": "https://example.com/pass.pkpass"})
        )
        [p] = passes_from_contract(contract)
        assert p.download_url_apple is None
        assert p.download_url_google is None

    def test_empty_data(self):
        assert passes_from_contract(PassesResponse.model_validate_json('{"data": []}')) == []

    def test_missing_download_url_fails(self):
        with pytest.raises(ValidationError):
            PassesResponse.model_validate_json(_envelope({"active": True}))

    def test_missing_type_fails(self):
        with pytest.raises(ValidationError):
            PassesResponse.model_validate_json(
                '{"data": [{"id": "x", "attributes": {"active": true, "download_url": "u"}}]}'
            )

    def test_string_active_fails(self):
        with pytest.raises(ValidationError):
            PassesResponse.model_validate_json(
                _envelope({"active": "true", "download_url": "https://example.com/p"})
            )


class TestErrorResponse:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ('{"error": "Unauthorized"}', "Unauthorized"),
            ('{"message": "Rate limit exceeded"}', "Rate limit exceeded"),
            ('{"error": "A", "message": "B"}', "A"),
            ('{"error": null, "message": "B"}', "B"),
            ("{}", None),
        ],
    )
    def test_surfaced_message(self, raw, expected):
        assert ErrorResponse.model_validate_json(raw).surfaced_message() == expected


def test_issuer_data_request_forbids_extra_fields():
    with pytest.raises(ValidationError):
        IssuerDataRequest(tag_id="1", id_attribute="reference_id", user="x")
