"""Async client for the VyOS HTTP management API."""

from .client import Vyos
from .envelope import Endpoint, Envelope, Operation
from .errors import RemoteOperationError, TransportError, VyosError
from .facades import ConfigFacade, ImageFacade, OpsFacade

__all__ = [
    "ConfigFacade",
    "Endpoint",
    "Envelope",
    "ImageFacade",
    "Operation",
    "OpsFacade",
    "RemoteOperationError",
    "TransportError",
    "Vyos",
    "VyosError",
]
