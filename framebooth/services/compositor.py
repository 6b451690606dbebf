import asyncio
import io
import logging
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageChops, ImageDraw

from framebooth.config import settings
from framebooth.errors import AssetLoadError, PhotoLoadWarning, RenderContextUnavailable
from framebooth.models.frame import (
    DOUBLE_STRIP_SLOT_COUNT,
    CompositeResult,
    FrameConfig,
    FramePreset,
    PhotoSlot,
)
from framebooth.services.assets import AssetLoader
from framebooth.services.layout import generate_default_slots, photo_sequence, scale_slots
from framebooth.services.presets import preset_for_render

logger = logging.getLogger(__name__)

Box = Tuple[float, float, float, float]

# Corner rounding, in percent of the shorter side, for slots that set no radius.
DEFAULT_CORNER_RADIUS = 8.0


def center_crop_box(src_width: int, src_height: int, dest_width: float, dest_height: float) -> Box:
    """Largest centred region of the source with the destination's aspect ratio."""
    dest_ratio = dest_width / dest_height
    img_ratio = src_width / src_height
    if dest_ratio > img_ratio:
        # Destination is wider: keep the full width, trim top and bottom.
        crop_height = src_width / dest_ratio
        top = (src_height - crop_height) / 2
        return (0.0, top, float(src_width), top + crop_height)
    crop_width = src_height * dest_ratio
    left = (src_width - crop_width) / 2
    return (left, 0.0, left + crop_width, float(src_height))


def rounded_mask(size: Tuple[int, int], radius_percent: float) -> Image.Image:
    width, height = size
    mask = Image.new("L", size, 0)
    radius = min(width, height) * radius_percent / 100
    ImageDraw.Draw(mask).rounded_rectangle((0, 0, width - 1, height - 1), radius=radius, fill=255)
    return mask


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    buffer = io.BytesIO()
    image.convert("RGB").save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def new_canvas(width: int, height: int) -> Image.Image:
    try:
        return Image.new("RGB", (width, height), "white")
    except (MemoryError, ValueError) as e:
        raise RenderContextUnavailable(f"Cannot allocate a {width}x{height} canvas: {e}") from e


def overlay(canvas: Image.Image, frame: Image.Image) -> None:
    """Draw the frame over the whole canvas, honouring its transparency."""
    frame = frame.convert("RGBA")
    if frame.size != canvas.size:
        frame = frame.resize(canvas.size, Image.Resampling.LANCZOS)
    canvas.paste(frame, (0, 0), frame)


class Compositor:
    """Renders captured photos into a frame template as a single JPEG."""

    def __init__(self, loader_factory: Callable[[], AssetLoader] = AssetLoader, quality: Optional[int] = None):
        self.loader_factory = loader_factory
        self.quality = quality or settings.jpeg_quality

    async def composite(
            self,
            photos: Sequence[str],
            frame_source: str,
            slots: Optional[Sequence[PhotoSlot]] = None,
            photo_count: Optional[int] = None,
            frame_config: Optional[FrameConfig] = None,
    ) -> CompositeResult:
        if photo_count is None:
            photo_count = len(photos)
        preset = preset_for_render(photo_count, frame_config)
        # Validated before any asset is fetched.
        sequence = photo_sequence(preset.layout, len(photos))
        expected_slots = DOUBLE_STRIP_SLOT_COUNT if preset.layout.is_double_strip else photo_count

        started = time.perf_counter()
        async with self.loader_factory() as loader:
            frame = await loader.load_image(frame_source)
            width, height = frame.size
            canvas = new_canvas(width, height)
            pixel_slots = self._resolve_slots(preset, slots, expected_slots, width, height)
            slot_size = (
                max(1, round(preset.default_slot_size.width / 100 * width)),
                max(1, round(preset.default_slot_size.height / 100 * height)),
            )

            warnings: List[PhotoLoadWarning] = []
            decoded: Dict[int, Optional[Image.Image]] = {}
            for index, slot in zip(sequence, pixel_slots):
                if index not in decoded:
                    decoded[index] = await self._load_photo(loader, index, photos[index], warnings)
                photo = decoded[index]
                if photo is None:
                    continue
                await asyncio.to_thread(self._draw, canvas, photo, slot, slot_size)

            await asyncio.to_thread(overlay, canvas, frame)
            data = await asyncio.to_thread(encode_jpeg, canvas, self.quality)

        logger.info(
            "Rendered %s composite %sx%s with %s slots in %.2fs (%s photo warnings)",
            preset.layout.value, width, height, min(len(sequence), len(pixel_slots)),
            time.perf_counter() - started, len(warnings),
        )
        return CompositeResult(data=data, width=width, height=height, warnings=warnings)

    @staticmethod
    def _resolve_slots(preset: FramePreset, slots: Optional[Sequence[PhotoSlot]], expected: int,
                       width: int, height: int) -> List[PhotoSlot]:
        if slots and len(slots) >= expected:
            return scale_slots(slots, width, height)
        logger.info(
            "Frame has %s of %s slots; using %s defaults",
            len(slots or []), expected, preset.layout.value,
        )
        return generate_default_slots(preset, width, height)

    @staticmethod
    async def _load_photo(loader: AssetLoader, index: int, source: str,
                          warnings: List[PhotoLoadWarning]) -> Optional[Image.Image]:
        try:
            return await loader.load_image(source, transpose=True)
        except AssetLoadError as e:
            warning = PhotoLoadWarning(index, source, e.reason)
            logger.warning("%s; leaving its slots blank", warning)
            warnings.append(warning)
            return None

    @staticmethod
    def _draw(canvas: Image.Image, photo: Image.Image, slot: PhotoSlot, size: Tuple[int, int]) -> None:
        box = center_crop_box(photo.width, photo.height, size[0], size[1])
        tile = photo.convert("RGBA").resize(size, Image.Resampling.LANCZOS, box=box)
        mask = tile.getchannel("A")
        radius = DEFAULT_CORNER_RADIUS if slot.radius is None else slot.radius
        if radius > 0:
            mask = ImageChops.multiply(mask, rounded_mask(size, radius))
        canvas.paste(tile, (round(slot.x), round(slot.y)), mask)


compositor = Compositor()
