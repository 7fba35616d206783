"""Async HTTP client for the VyOS management API."""

import json
import logging
from typing import TYPE_CHECKING, Any, Union

import httpx

from .envelope import Endpoint, Envelope, Operation
from .errors import RemoteOperationError, TransportError
from .facades import ConfigFacade, ImageFacade, OpsFacade

if TYPE_CHECKING:
    from .config import ClientConfig

logger = logging.getLogger(__name__)

Descriptor = Union[Operation, dict[str, Any]]


class Vyos:
    """Client for a single VyOS device.

    Every operation is one multipart POST carrying the API key and a JSON
    operation descriptor. Group accessors (``config``, ``images``, ``ops``)
    are cheap stateless views over this client.

    See https://docs.vyos.io/en/latest/configuration/service/https.html for
    enabling the API and provisioning keys.
    """

    def __init__(self, url: str, key: str, verify_tls: bool = False):
        self._base_url = str(httpx.URL(url)).rstrip("/")
        self._key = key
        self._verify_tls = verify_tls

    @classmethod
    def from_config(cls, config: "ClientConfig") -> "Vyos":
        return cls(config.url, config.key, verify_tls=config.verify_tls)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _form(self, descriptor: Descriptor) -> dict[str, tuple[None, str]]:
        payload = descriptor.as_payload() if isinstance(descriptor, Operation) else descriptor
        return {
            "key": (None, self._key),
            "data": (None, json.dumps(payload)),
        }

    async def request(self, endpoint: Union[Endpoint, str], descriptor: Descriptor) -> Envelope:
        """POST a descriptor to ``<base_url>/<endpoint>`` and return the envelope.

        Args:
            endpoint: API endpoint, e.g. ``Endpoint.CONFIGURE`` or ``"configure"``.
            descriptor: Operation descriptor or an equivalent plain dict.

        Raises:
            RemoteOperationError: the envelope reports ``success: false``,
                whatever the HTTP status.
            TransportError: no response, or a response that is not a usable
                envelope.
        """
        name = endpoint.value if isinstance(endpoint, Endpoint) else endpoint
        url = f"{self._base_url}/{name}"
        logger.debug("POST %s", url)

        try:
            async with httpx.AsyncClient(verify=self._verify_tls) as client:
                resp = await client.post(url, files=self._form(descriptor))
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise TransportError(f"Cannot reach {url}: {e}", cause=e) from e

        try:
            body = resp.json()
        except ValueError as e:
            raise TransportError(
                f"{url} returned HTTP {resp.status_code} with a non-JSON body", cause=e
            ) from e

        envelope = Envelope.parse(body)
        if envelope is not None and not envelope.success:
            message = envelope.error if envelope.error is not None else f"HTTP {resp.status_code}"
            logger.warning("%s failed: %s", name, message)
            raise RemoteOperationError(message, status_code=resp.status_code)

        if envelope is None or not resp.is_success:
            raise TransportError(
                f"{url} returned HTTP {resp.status_code} without a usable result envelope"
            )
        return envelope

    async def send(self, endpoint: Union[Endpoint, str], descriptor: Descriptor) -> Any:
        """Like ``request`` but return only the envelope's ``data``."""
        envelope = await self.request(endpoint, descriptor)
        return envelope.data

    @property
    def config(self) -> ConfigFacade:
        """Configuration mode: show/set/delete/comment/save/load."""
        return ConfigFacade(self)

    @property
    def images(self) -> ImageFacade:
        """OS image management: add/remove."""
        return ImageFacade(self)

    @property
    def ops(self) -> OpsFacade:
        """Operational mode: show/generate."""
        return OpsFacade(self)
