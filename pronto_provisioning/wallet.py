"""Host-provided collaborators: the wallet platform and lifecycle delegate."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .errors import ProvisioningError
from .models import ProvisioningOutcome


@runtime_checkable
class WalletPlatform(Protocol):
    """The device wallet framework.

    ``present`` shows the native pass-binding UI for the given issuer data and
    signature and resolves once the UI is dismissed. Raising from ``present``
    reports a platform UI failure.
    """

    def can_add_passes(self) -> bool: ...

    async def present(
        self,
        issuer_data: bytes,
        signature: bytes,
        context: Any = None,
    ) -> ProvisioningOutcome: ...


@runtime_checkable
class ProvisioningDelegate(Protocol):
    """Receives exactly one terminal signal per provisioning attempt."""

    def provisioning_did_complete(self) -> None: ...

    def provisioning_did_fail(self, error: ProvisioningError) -> None: ...

    def provisioning_did_cancel(self) -> None: ...
