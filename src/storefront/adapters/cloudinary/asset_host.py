"""Cloudinary adapter – CloudinaryAssetHost."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from storefront.kernel.errors import UpstreamError
from storefront.observability.logging import get_logger

__all__ = ["CloudinaryAssetHost"]

logger = get_logger(__name__)


class CloudinaryAssetHost:
    """AssetHost over the Cloudinary SDK.

    The SDK is blocking, so each call runs in a worker thread (which also
    reads the staged file). Credentials are passed per call rather than
    through the SDK's global config.
    """

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        uploader: Any = cloudinary.uploader,
    ) -> None:
        self._credentials = {"cloud_name": cloud_name, "api_key": api_key, "api_secret": api_secret}
        self._uploader = uploader

    async def _call(self, operation: str, target: str) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(getattr(self._uploader, operation), target, **self._credentials)
        except CloudinaryError as exc:
            raise UpstreamError("cloudinary", f"{operation} failed: {exc}") from exc

    async def upload(self, path: Path) -> str:
        result = await self._call("upload", str(path))
        url = result.get("secure_url")
        if not url:
            raise UpstreamError("cloudinary", "upload response carried no secure_url")
        logger.info("asset.uploaded", url=url)
        return url

    async def destroy(self, public_id: str) -> None:
        await self._call("destroy", public_id)
        logger.info("asset.destroyed", public_id=public_id)

    async def close(self) -> None:
        """The SDK keeps no connection to release."""
