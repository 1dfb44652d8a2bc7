"""SDK configuration supplied once by the host application."""

from __future__ import annotations

import os
from typing import Annotated

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, PlainValidator

from .environment import ProntoEnvironment
from .errors import NotConfiguredError

DEFAULT_TIMEOUT_SECONDS = 30.0

API_KEY_ENV_VAR = "PRONTO_API_KEY"
ENVIRONMENT_ENV_VAR = "PRONTO_ENVIRONMENT"
TIMEOUT_ENV_VAR = "PRONTO_TIMEOUT_SECONDS"


def _to_environment(value) -> ProntoEnvironment:
    if isinstance(value, ProntoEnvironment):
        return value
    if isinstance(value, str):
        return ProntoEnvironment.parse(value)
    raise ValueError(f"environment must be a ProntoEnvironment, got {type(value).__name__}")


class ProntoConfiguration(BaseModel):
    """Credentials and transport settings for the Pronto API.

    ``api_key`` is the API user auth token from the Pronto admin. It is not
    validated here; an empty key simply fails authentication server-side.
    ``environment`` also accepts the string forms understood by
    ``ProntoEnvironment.parse``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(repr=False)
    environment: Annotated[ProntoEnvironment, PlainValidator(_to_environment)] = (
        ProntoEnvironment.PRODUCTION
    )
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(
        cls,
        *,
        dotenv: bool = True,
        api_key: str | None = None,
        environment: str | None = None,
        timeout_seconds: str | float | None = None,
    ) -> ProntoConfiguration:
        """Build a configuration from ``PRONTO_*`` environment variables.

        A ``.env`` file in the working directory is loaded first (existing
        variables win). Explicit keyword values take priority over the
        environment.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        api_key = api_key or os.environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise NotConfiguredError(f"{API_KEY_ENV_VAR} is not set.")

        raw_env = environment or os.environ.get(ENVIRONMENT_ENV_VAR, "").strip()
        resolved_env = ProntoEnvironment.parse(raw_env) if raw_env else ProntoEnvironment.PRODUCTION

        if timeout_seconds is None:
            timeout_seconds = os.environ.get(TIMEOUT_ENV_VAR, "")

        return cls(
            api_key=api_key,
            environment=resolved_env,
            timeout_seconds=_to_timeout(str(timeout_seconds)),
        )


def _to_timeout(raw: str) -> float:
    raw = raw.strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{TIMEOUT_ENV_VAR} must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"Timeout must be positive, got {raw!r}")
    return value
