"""Exceptions raised by the VyOS API client."""

from typing import Optional


class VyosError(Exception):
    """Base class for every failure surfaced by the client."""


class TransportError(VyosError):
    """The exchange with the device failed or returned nothing usable."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteOperationError(VyosError):
    """The device ran the request and reported ``success: false``."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
