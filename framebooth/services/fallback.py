"""Simpler renderers used when the layout-aware compositor cannot run."""
import asyncio
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image

from framebooth.config import settings
from framebooth.errors import AssetLoadError, PhotoLoadWarning
from framebooth.models.frame import CompositeResult
from framebooth.services.assets import AssetLoader
from framebooth.services.compositor import encode_jpeg, new_canvas, overlay

logger = logging.getLogger(__name__)

MAX_PHOTOS = 4
PHOTO_LEFT = 50
PHOTO_TOP = 50
PHOTO_MARGIN = 20


class SimpleCompositor:
    """Stacks up to four photos on a fixed-size strip and lays the frame over them.

    Photos are stretched rather than cropped and slots are ignored. Each photo
    gets the full width minus the side margins and an equal share of the height.
    """

    def __init__(self, loader_factory: Callable[[], AssetLoader] = AssetLoader,
                 width: Optional[int] = None, height: Optional[int] = None, quality: Optional[int] = None):
        self.loader_factory = loader_factory
        self.width = width or settings.fallback_width
        self.height = height or settings.fallback_height
        self.quality = quality or settings.fallback_jpeg_quality

    async def composite(self, photos: Sequence[str], frame_source: str) -> CompositeResult:
        canvas = new_canvas(self.width, self.height)
        photo_width = self.width - 2 * PHOTO_LEFT
        photo_height = (self.height - 2 * PHOTO_TOP - (MAX_PHOTOS - 1) * PHOTO_MARGIN) // MAX_PHOTOS
        warnings: List[PhotoLoadWarning] = []
        async with self.loader_factory() as loader:
            frame = await loader.load_image(frame_source)
            for index, source in enumerate(photos[:MAX_PHOTOS]):
                try:
                    photo = await loader.load_image(source, transpose=True)
                except AssetLoadError as e:
                    warning = PhotoLoadWarning(index, source, e.reason)
                    logger.warning("%s; skipped by fallback compositor", warning)
                    warnings.append(warning)
                    continue
                top = PHOTO_TOP + index * (photo_height + PHOTO_MARGIN)
                await asyncio.to_thread(_paste_stretched, canvas, photo, (PHOTO_LEFT, top),
                                        (photo_width, photo_height))
            await asyncio.to_thread(overlay, canvas, frame)
        data = await asyncio.to_thread(encode_jpeg, canvas, self.quality)
        return CompositeResult(data=data, width=self.width, height=self.height, warnings=warnings)


def _paste_stretched(canvas: Image.Image, photo: Image.Image, position: Tuple[int, int],
                     size: Tuple[int, int]) -> None:
    canvas.paste(photo.convert("RGB").resize(size, Image.Resampling.LANCZOS), position)


def _paste_photo(canvas: Image.Image, photo: Image.Image) -> None:
    photo = photo.convert("RGBA")
    canvas.paste(photo, (0, 0), photo)


async def overlay_frame(photo_source: str, frame_source: str, quality: Optional[int] = None,
                        loader_factory: Callable[[], AssetLoader] = AssetLoader) -> CompositeResult:
    """Lay a frame over a single photo at the photo's own size."""
    async with loader_factory() as loader:
        photo = await loader.load_image(photo_source, transpose=True)
        frame = await loader.load_image(frame_source)
    canvas = new_canvas(photo.width, photo.height)
    await asyncio.to_thread(_paste_photo, canvas, photo)
    await asyncio.to_thread(overlay, canvas, frame)
    data = await asyncio.to_thread(encode_jpeg, canvas, quality or settings.jpeg_quality)
    return CompositeResult(data=data, width=canvas.width, height=canvas.height)


fallback_compositor = SimpleCompositor()
