"""v2 wire contracts for the Pronto provisioning API."""

__version__ = "2.0.0"

from .schemas import (
    ErrorResponse,
    IssuerDataRequest,
    IssuerDataResponse,
    PassAttributes,
    PassesResponse,
    PassResource,
)

__all__ = [
    "__version__",
    "ErrorResponse",
    "IssuerDataRequest",
    "IssuerDataResponse",
    "PassAttributes",
    "PassResource",
    "PassesResponse",
]
