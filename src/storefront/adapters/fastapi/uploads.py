"""FastAPI adapter – stage multipart uploads on local disk."""
from __future__ import annotations

import asyncio
import contextlib
from pathlib import Path
from typing import AsyncIterator
from uuid import uuid4

from fastapi import UploadFile

from storefront.observability.logging import get_logger

logger = get_logger(__name__)


def _write(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


@contextlib.asynccontextmanager
async def staged_upload(upload: UploadFile | None, directory: str | Path) -> AsyncIterator[Path | None]:
    """Write *upload* to ``<directory>/<uuid4><original name>`` for the block.

    The staged file is removed on exit whether or not the block raised.
    Yields ``None`` when no file was sent.
    """
    if upload is None or not upload.filename:
        yield None
        return

    path = Path(directory) / f"{uuid4()}{Path(upload.filename).name}"
    await asyncio.to_thread(_write, path, await upload.read())
    try:
        yield path
    finally:
        await asyncio.to_thread(path.unlink, missing_ok=True)
        logger.debug("upload.removed", path=str(path))


__all__ = ["staged_upload"]
