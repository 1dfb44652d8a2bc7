"""Host-owned provisioning session: fetch issuer data, then hand it to the wallet.

A ``ProvisioningSession`` replaces a process-wide singleton. The host creates
one, configures it, and calls ``provision_pass`` from a running event loop.
Each call returns a ``ProvisioningAttempt`` that settles exactly once.
"""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from typing import Any, Callable, Optional

from .api_client import ProntoAPIClient
from .configuration import ProntoConfiguration
from .errors import (
    InvalidResponseError,
    NetworkError,
    NotConfiguredError,
    PlatformUIError,
    ProvisioningError,
    WalletUnavailableError,
)
from .models import Pass, ProvisioningOutcome, ProvisioningState, TagIdAttribute
from .wallet import ProvisioningDelegate, WalletPlatform

logger = logging.getLogger(__name__)


class ProvisioningAttempt:
    """Handle for one provisioning attempt.

    Settles once with a ``ProvisioningOutcome`` or a ``ProvisioningError``.
    Later settle calls are ignored, so a result arriving after the host has
    cancelled or superseded the attempt never reaches the delegate.
    """

    def __init__(self, tag_id: str, delegate: Optional[ProvisioningDelegate] = None):
        self.tag_id = tag_id
        self.delegate = delegate
        self.state = ProvisioningState.IDLE
        self.outcome: Optional[ProvisioningOutcome] = None
        self.error: Optional[ProvisioningError] = None
        self.task: Optional[asyncio.Task] = None
        self._settled = asyncio.Event()

    @property
    def done(self) -> bool:
        return self._settled.is_set()

    async def wait(self) -> ProvisioningOutcome:
        """Wait for the attempt to settle; raise its error if it failed."""
        await self._settled.wait()
        if self.error is not None:
            raise self.error
        return self.outcome

    def complete(self) -> bool:
        return self._settle(ProvisioningOutcome.COMPLETED, None)

    def cancel(self) -> bool:
        return self._settle(ProvisioningOutcome.CANCELLED, None)

    def fail(self, error: ProvisioningError) -> bool:
        return self._settle(None, error)

    def _settle(
        self,
        outcome: Optional[ProvisioningOutcome],
        error: Optional[ProvisioningError],
    ) -> bool:
        if self.done:
            return False
        self.outcome = outcome
        self.error = error
        self.state = ProvisioningState.IDLE
        self._settled.set()
        self._notify()
        return True

    def _notify(self) -> None:
        if self.delegate is None:
            return
        try:
            if self.error is not None:
                self.delegate.provisioning_did_fail(self.error)
            elif self.outcome == ProvisioningOutcome.CANCELLED:
                self.delegate.provisioning_did_cancel()
            else:
                self.delegate.provisioning_did_complete()
        except Exception as e:
            logger.warning("Provisioning delegate for tag %s raised: %s", self.tag_id, e)


def decode_blob(value: str) -> bytes:
    """Strict base64 decode; raises ``InvalidResponseError`` on bad input."""
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise InvalidResponseError() from None


class ProvisioningSession:
    """Orchestrates pass provisioning for one host application."""

    def __init__(
        self,
        configuration: Optional[ProntoConfiguration] = None,
        *,
        platform: WalletPlatform,
        client_factory: Callable[[ProntoConfiguration], ProntoAPIClient] = ProntoAPIClient,
    ):
        self._configuration = configuration
        self.platform = platform
        self.client_factory = client_factory
        self._current: Optional[ProvisioningAttempt] = None

    def configure(self, configuration: ProntoConfiguration) -> None:
        """Set the configuration used by subsequent attempts."""
        self._configuration = configuration

    @property
    def configuration(self) -> Optional[ProntoConfiguration]:
        return self._configuration

    @property
    def is_configured(self) -> bool:
        return self._configuration is not None

    @property
    def is_wallet_available(self) -> bool:
        return bool(self.platform.can_add_passes())

    @property
    def current_attempt(self) -> Optional[ProvisioningAttempt]:
        return self._current

    @property
    def state(self) -> ProvisioningState:
        if self._current is None or self._current.done:
            return ProvisioningState.IDLE
        return self._current.state

    def provision_pass(
        self,
        tag_id: str,
        delegate: Optional[ProvisioningDelegate] = None,
        *,
        id_attribute: TagIdAttribute | str = TagIdAttribute.REFERENCE_ID,
        presentation_context: Any = None,
    ) -> ProvisioningAttempt:
        """Start provisioning ``tag_id`` into the device wallet.

        Configuration and wallet availability are checked synchronously; on
        failure the returned attempt is already settled and the session stays
        idle. Otherwise the fetch runs as an ``asyncio`` task and any attempt
        still in flight is cancelled.
        """
        attempt = ProvisioningAttempt(tag_id, delegate)

        configuration = self._configuration
        if configuration is None:
            attempt.fail(NotConfiguredError())
            return attempt

        if not self.is_wallet_available:
            attempt.fail(WalletUnavailableError())
            return attempt

        loop = asyncio.get_running_loop()
        self.cancel()

        attempt.state = ProvisioningState.AWAITING_ISSUER_DATA
        self._current = attempt
        attempt.task = loop.create_task(
            self._run(attempt, configuration, id_attribute, presentation_context)
        )
        return attempt

    def cancel(self) -> None:
        """Abandon the in-flight attempt, if any.

        The attempt's delegate receives one cancel signal. The worker thread
        running the HTTP call cannot be interrupted; its result is discarded.
        """
        attempt = self._current
        if attempt is None:
            return
        self._current = None
        if attempt.cancel():
            logger.info("Provisioning attempt for tag %s cancelled", attempt.tag_id)
        if attempt.task is not None and not attempt.task.done():
            attempt.task.cancel()

    async def fetch_passes(self, user_id: str) -> list[Pass]:
        """Fetch the passes of ``user_id`` with the session configuration."""
        if self._configuration is None:
            raise NotConfiguredError()
        client = self.client_factory(self._configuration)
        return await asyncio.to_thread(client.fetch_passes, user_id)

    async def _run(
        self,
        attempt: ProvisioningAttempt,
        configuration: ProntoConfiguration,
        id_attribute: TagIdAttribute | str,
        presentation_context: Any,
    ) -> None:
        try:
            client = self.client_factory(configuration)
            try:
                result = await asyncio.to_thread(
                    client.fetch_issuer_data, attempt.tag_id, id_attribute
                )
            except (asyncio.CancelledError, ProvisioningError):
                raise
            except Exception as e:
                raise NetworkError(e) from e
            issuer_data = decode_blob(result.issuer_data_base64)
            signature = decode_blob(result.signature_base64)

            attempt.state = ProvisioningState.PRESENTING
            try:
                outcome = await self.platform.present(issuer_data, signature, presentation_context)
            except (asyncio.CancelledError, ProvisioningError):
                raise
            except Exception as e:
                raise PlatformUIError(e) from e

            if outcome == ProvisioningOutcome.CANCELLED:
                attempt.cancel()
            else:
                attempt.complete()
        except asyncio.CancelledError:
            attempt.cancel()
            raise
        except ProvisioningError as e:
            if attempt.fail(e):
                logger.warning("Provisioning tag %s failed: %s", attempt.tag_id, e)
        finally:
            if self._current is attempt:
                self._current = None
