"""Application – AssetHost port for product photos."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol, runtime_checkable

__all__ = ["AssetHost", "public_id_from_url"]

_PUBLIC_ID_RE = re.compile(r"/v\d+/(.+)\.[a-z]+$")


@runtime_checkable
class AssetHost(Protocol):
    """External image hosting: upload a local file, destroy by public id."""

    async def upload(self, path: Path) -> str:
        """Upload *path* and return its durable (https) URL."""
        ...

    async def destroy(self, public_id: str) -> None: ...

    async def close(self) -> None: ...


def public_id_from_url(url: str) -> str | None:
    """Extract the public id from ``.../v<version>/<public_id>.<ext>``."""
    match = _PUBLIC_ID_RE.search(url)
    return match.group(1) if match else None
