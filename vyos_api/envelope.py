"""Wire types: endpoints, operation descriptors and the result envelope."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Endpoint(str, Enum):
    """Operation families exposed by the device's HTTP API."""
    CONFIGURE = "configure"
    RETRIEVE = "retrieve"
    CONFIG_FILE = "config-file"
    IMAGE = "image"
    SHOW = "show"
    GENERATE = "generate"


@dataclass
class Operation:
    """A single request body, discriminated by ``op``."""
    op: str
    path: Optional[list[str]] = None
    value: Optional[str] = None
    url: Optional[str] = None
    name: Optional[str] = None

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"op": self.op}
        for attr in ("path", "value", "url", "name"):
            val = getattr(self, attr)
            if val is not None:
                payload[attr] = val
        return payload


@dataclass
class Envelope:
    """The device's uniform response: ``{success, data, error}``."""
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def parse(cls, body: Any) -> Optional["Envelope"]:
        """Build an envelope from decoded JSON, or None if it isn't one."""
        if not isinstance(body, dict):
            return None
        success = body.get("success")
        if not isinstance(success, bool):
            return None
        error = body.get("error")
        return cls(
            success=success,
            data=body.get("data"),
            error=str(error) if error is not None else None,
        )
