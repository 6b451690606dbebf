from typing import Optional

from framebooth.config import settings
from framebooth.models.frame import FramePreset, PhotoSlot

MIN_SLOT_SIZE = 10.0


def visual_ratio(slot: PhotoSlot, frame_width_cm: float, frame_height_cm: float) -> float:
    """Printed width/height ratio of a percent slot on paper of the given size."""
    return (slot.width * frame_width_cm) / (slot.height * frame_height_cm)


def normalize(slot: PhotoSlot, target_ratio: float, frame_width_cm: float, frame_height_cm: float,
              tolerance: Optional[float] = None) -> PhotoSlot:
    """Correct a slot's height so it prints at ``target_ratio``.

    Width is what admins drag freely, so it stays fixed together with the
    position; only the height is recomputed. Slots already within
    ``tolerance`` are returned as they are. Raises ``ValueError`` for an empty
    slot or a non-positive ratio or paper size.
    """
    if slot.width <= 0 or slot.height <= 0:
        raise ValueError(f"Slot {slot.id} has no area ({slot.width}x{slot.height})")
    if target_ratio <= 0 or frame_width_cm <= 0 or frame_height_cm <= 0:
        raise ValueError("Target ratio and paper size must be positive")
    if tolerance is None:
        tolerance = settings.aspect_ratio_tolerance
    if abs(visual_ratio(slot, frame_width_cm, frame_height_cm) - target_ratio) < tolerance:
        return slot
    height = (slot.width * frame_width_cm) / (target_ratio * frame_height_cm)
    return slot.model_copy(update={"height": height})


def normalize_for_preset(slot: PhotoSlot, preset: FramePreset, target_ratio: float,
                         tolerance: Optional[float] = None) -> PhotoSlot:
    if preset.paper_width_cm is None or preset.paper_height_cm is None:
        raise ValueError(f"Preset '{preset.name}' has no paper size")
    return normalize(slot, target_ratio, preset.paper_width_cm, preset.paper_height_cm, tolerance)


def move_slot(slot: PhotoSlot, dx: float, dy: float) -> PhotoSlot:
    """Drag a slot, keeping it fully inside the frame."""
    x = max(0.0, min(100 - slot.width, slot.x + dx))
    y = max(0.0, min(100 - slot.height, slot.y + dy))
    return slot.model_copy(update={"x": x, "y": y})


def resize_slot(slot: PhotoSlot, dw: float, dh: float, min_size: float = MIN_SLOT_SIZE) -> PhotoSlot:
    """Resize a slot from its bottom-right corner, keeping it inside the frame."""
    width = max(min_size, min(100 - slot.x, slot.width + dw))
    height = max(min_size, min(100 - slot.y, slot.height + dh))
    return slot.model_copy(update={"width": width, "height": height})
