"""In-memory fixture data served by the development server."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass
class TagRecord:
    tag_id: int
    issuer_data: bytes
    signature: bytes
    identifiers: dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> dict:
        return {
            "issuer_data": base64.b64encode(self.issuer_data).decode("ascii"),
            "signature": base64.b64encode(self.signature).decode("ascii"),
            "tag_id": self.tag_id,
        }


@dataclass
class PassRecord:
    id: str
    active: bool
    download_url: str
    download_url_apple: str | None = None
    download_url_google: str | None = None

    def to_resource(self) -> dict:
        return {
            "id": self.id,
            "type": "pass",
            "attributes": {
                "active": self.active,
                "download_url": self.download_url,
                "download_url_apple": self.download_url_apple,
                "download_url_google": self.download_url_google,
            },
        }


class FixtureStore:
    """Tags and per-user passes, looked up the way the real API does."""

    def __init__(self):
        self.tags: list[TagRecord] = []
        self.passes: dict[str, list[PassRecord]] = {}

    def add_tag(self, record: TagRecord) -> None:
        self.tags.append(record)

    def add_pass(self, user_id: str, record: PassRecord) -> None:
        self.passes.setdefault(str(user_id), []).append(record)

    def find_tag(self, tag_id: str, id_attribute: str) -> TagRecord | None:
        for record in self.tags:
            if id_attribute == "pronto_tag_id" and str(record.tag_id) == tag_id:
                return record
            if record.identifiers.get(id_attribute) == tag_id:
                return record
        return None

    def passes_for(self, user_id: str) -> list[PassRecord] | None:
        return self.passes.get(str(user_id))


def seed_store() -> FixtureStore:
    """Return a store populated with a small demo data set."""
    store = FixtureStore()
    store.add_tag(
        TagRecord(
            tag_id=42,
            issuer_data=b"issuerData",
            signature=b"signature",
            identifiers={"reference_id": "PASS-001", "subscription_id": "SUB-99"},
        )
    )
    store.add_pass(
        "1",
        PassRecord(
            id="ref-001",
            active=True,
            download_url="https://example.com/pass.pkpass",
            download_url_apple="https://example.com/apple.pkpass",
            download_url_google="https://example.com/google",
        ),
    )
    store.add_pass(
        "1",
        PassRecord(
            id="ref-002",
            active=False,
            download_url="https://example.com/legacy.pkpass",
        ),
    )
    return store
