"""Operation groups built on top of ``Vyos.request``.

Each group is a stateless view holding a reference to the client; every
method builds one operation descriptor and sends it.
"""

from typing import TYPE_CHECKING, Any, Optional

from .envelope import Endpoint, Operation
from .paths import split_path, unwrap_show

if TYPE_CHECKING:
    from .client import Vyos

DEFAULT_CONFIG_FILE = "/config/config.boot"


class ConfigFacade:
    """Configuration mode.

    See https://docs.vyos.io/en/latest/cli.html#configuration-overview

    Usage:
        await vyos.config.set("system host-name", "my-vyos")
        await vyos.config.show("system host-name")  # -> "my-vyos"
        await vyos.config.save()
    """

    def __init__(self, vyos: "Vyos"):
        self._vyos = vyos

    async def show(self, path: str) -> Any:
        """Return the configuration node or leaf value at ``path``."""
        segments = split_path(path)
        data = await self._vyos.send(
            Endpoint.RETRIEVE, Operation(op="showConfig", path=segments)
        )
        return unwrap_show(segments, data)

    get = show

    async def set(self, path: str, value: str) -> None:
        """Set ``path`` to ``value`` and commit."""
        await self._vyos.send(
            Endpoint.CONFIGURE, Operation(op="set", path=split_path(path), value=value)
        )

    async def delete(self, path: str) -> None:
        """Delete the configuration at ``path`` and commit."""
        await self._vyos.send(
            Endpoint.CONFIGURE, Operation(op="delete", path=split_path(path))
        )

    async def comment(self, path: str, value: str) -> None:
        """Set the comment on ``path``. An empty ``value`` removes it."""
        await self._vyos.send(
            Endpoint.CONFIGURE, Operation(op="comment", path=split_path(path), value=value)
        )

    async def save(self, file: Optional[str] = None) -> None:
        """Store the running configuration to ``file`` (default /config/config.boot)."""
        if file is None:
            file = DEFAULT_CONFIG_FILE
        await self._vyos.send(Endpoint.CONFIG_FILE, Operation(op="save", value=file))

    async def load(self, file: Optional[str] = None) -> None:
        """Load configuration from ``file`` (default /config/config.boot)."""
        if file is None:
            file = DEFAULT_CONFIG_FILE
        await self._vyos.send(Endpoint.CONFIG_FILE, Operation(op="load", value=file))


class ImageFacade:
    """OS image management."""

    def __init__(self, vyos: "Vyos"):
        self._vyos = vyos

    async def add(self, url: str) -> None:
        """Download and install the image at ``url``."""
        await self._vyos.send(Endpoint.IMAGE, Operation(op="add", url=url))

    async def remove(self, name: str) -> None:
        """Remove the installed image ``name``, e.g. ``1.4-rolling-202101301326``."""
        await self._vyos.send(Endpoint.IMAGE, Operation(op="delete", name=name))


class OpsFacade:
    """Operational mode commands."""

    def __init__(self, vyos: "Vyos"):
        self._vyos = vyos

    async def show(self, path: str) -> Any:
        """Run ``show <path>``, e.g. ``await vyos.ops.show("date")``."""
        return await self._vyos.send(
            Endpoint.SHOW, Operation(op="show", path=split_path(path))
        )

    async def generate(self, path: str) -> Any:
        """Run ``generate <path>``, e.g. ``wireguard default-keypair``."""
        return await self._vyos.send(
            Endpoint.GENERATE, Operation(op="generate", path=split_path(path))
        )
