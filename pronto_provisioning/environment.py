"""Pronto server environments and base-URL resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit


class EnvironmentKind(str, Enum):
    PRODUCTION = "production"
    STAGING = "staging"
    DEMO = "demo"
    DEVELOPMENT = "development"
    CUSTOM = "custom"


HOSTED_BASE_URLS = {
    EnvironmentKind.PRODUCTION: "https://app.prontocx.com",
    EnvironmentKind.STAGING: "https://app.stage.prontocx.com",
    EnvironmentKind.DEMO: "https://app.demo.prontocx.com",
}


@dataclass(frozen=True)
class ProntoEnvironment:
    """The Pronto server environment to connect to.

    Build instances with the class-level constants (``PRODUCTION``,
    ``STAGING``, ``DEMO``) or the ``development``/``custom`` constructors.
    Resolution to a base URL never touches the network.
    """

    kind: EnvironmentKind
    value: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "kind", EnvironmentKind(self.kind))
        if self.kind in HOSTED_BASE_URLS:
            if self.value is not None:
                raise ValueError(f"Environment '{self.kind.value}' takes no value")
        elif self.kind == EnvironmentKind.DEVELOPMENT:
            if not self.value or "/" in self.value:
                raise ValueError(f"Invalid development host: {self.value!r}")
        elif self.kind == EnvironmentKind.CUSTOM:
            _validate_custom_url(self.value)

    @classmethod
    def development(cls, host: str) -> ProntoEnvironment:
        """Unencrypted ``http://{host}`` environment for local testing."""
        return cls(EnvironmentKind.DEVELOPMENT, host)

    @classmethod
    def custom(cls, url: str) -> ProntoEnvironment:
        return cls(EnvironmentKind.CUSTOM, url)

    @classmethod
    def parse(cls, raw: str) -> ProntoEnvironment:
        """Parse ``production``, ``development:<host>`` or an http(s) URL."""
        text = (raw or "").strip()
        lowered = text.lower()
        for kind in HOSTED_BASE_URLS:
            if lowered == kind.value:
                return cls(kind)
        if lowered.startswith("development:"):
            return cls.development(text.split(":", 1)[1].strip())
        if lowered.startswith(("http://", "https://")):
            return cls.custom(text)
        valid = ", ".join(k.value for k in HOSTED_BASE_URLS)
        raise ValueError(
            f"Unknown environment '{raw}'. Use one of {valid}, "
            "'development:<host>' or an http(s) URL."
        )

    @property
    def base_url(self) -> str:
        return resolve_base_url(self)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}:{self.value}"


ProntoEnvironment.PRODUCTION = ProntoEnvironment(EnvironmentKind.PRODUCTION)
ProntoEnvironment.STAGING = ProntoEnvironment(EnvironmentKind.STAGING)
ProntoEnvironment.DEMO = ProntoEnvironment(EnvironmentKind.DEMO)


def _validate_custom_url(url: str | None) -> None:
    if not url:
        raise ValueError("Custom environment requires a URL")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Malformed custom environment URL: {url!r}")


def resolve_base_url(env: ProntoEnvironment) -> str:
    """Return the base URL for ``env`` (pure, no I/O)."""
    if env.kind in HOSTED_BASE_URLS:
        return HOSTED_BASE_URLS[env.kind]
    if env.kind == EnvironmentKind.DEVELOPMENT:
        return f"http://{env.value}"
    return env.value
