import asyncio
import base64
import binascii
import io
import logging
import os
from typing import Optional
from urllib.parse import unquote_to_bytes

import aiofiles
import aiohttp
from PIL import Image, ImageOps

from framebooth.config import settings
from framebooth.errors import AssetLoadError

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png", ".webp", ".gif", ".bmp")


def _looks_like_path(source: str) -> bool:
    # Base64 never contains "." so this cannot match a bare JPEG payload ("/9j/...").
    return source.startswith(("file://", "./", "../")) or source.lower().endswith(IMAGE_SUFFIXES)


def decode_data_uri(source: str) -> bytes:
    header, _, payload = source.partition(",")
    if header.endswith(";base64"):
        return base64.b64decode(payload, validate=True)
    return unquote_to_bytes(payload)


class AssetLoader:
    """Fetches and decodes frame and photo sources for a single render.

    Sources may be http(s) URLs, ``data:`` URIs, local file paths or bare
    base64 strings as handed over by booth cameras. Use as an async
    context manager so the HTTP session is closed once the render finishes.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "AssetLoader":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    def _http(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        return self._session

    async def load_bytes(self, source: str) -> bytes:
        try:
            if source.startswith(("http://", "https://")):
                async with self._http().get(source) as response:
                    response.raise_for_status()
                    return await response.read()
            if source.startswith("data:"):
                return decode_data_uri(source)
            path = source[len("file://"):] if source.startswith("file://") else source
            if os.path.isfile(path):
                async with aiofiles.open(path, "rb") as f:
                    return await f.read()
            if _looks_like_path(source):
                raise FileNotFoundError(path)
            return base64.b64decode(source, validate=True)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, binascii.Error, ValueError) as e:
            raise AssetLoadError(source, type(e).__name__) from e

    async def load_image(self, source: str, transpose: bool = False) -> Image.Image:
        """Load ``source`` and decode it fully.

        ``transpose`` applies the EXIF orientation, which camera photos carry
        and frame assets should not be second-guessed on.
        """
        data = await self.load_bytes(source)
        return await asyncio.to_thread(self._decode, source, data, transpose)

    @staticmethod
    def _decode(source: str, data: bytes, transpose: bool) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise AssetLoadError(source, type(e).__name__) from e
        if transpose:
            image = ImageOps.exif_transpose(image)
        logger.debug("Decoded %s image %sx%s", image.format, image.width, image.height)
        return image
