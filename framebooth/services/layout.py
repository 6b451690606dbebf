"""Default slot placement for frame presets.

Slots are computed in percent of the frame and only then scaled to the
requested unit, so the admin preview (percent) and the render fallback (canvas
pixels) always agree.
"""
from typing import Callable, Dict, List, Sequence

from framebooth.errors import UnsupportedLayoutError
from framebooth.models.frame import FramePreset, LayoutKind, PhotoSlot, SlotSize

# Bottom 5% of the frame is left free as a print-edge margin.
SAFE_ZONE = 95.0

VERTICAL_GAP = 5.0
STRIP_GAP = 3.0
GRID_GAP = 4.0
DOUBLE_STRIP_WIDE_GAP = 4.0
DOUBLE_STRIP_NARROW_GAP = 2.0

DOUBLE_STRIP_PHOTOS = 4


def _centered_block(size: SlotSize, cols: int, rows: int,
                    col_gap: float = 0.0, row_gap: float = 0.0) -> List[PhotoSlot]:
    block_width = cols * size.width + (cols - 1) * col_gap
    block_height = rows * size.height + (rows - 1) * row_gap
    left = (100 - block_width) / 2
    top = (SAFE_ZONE - block_height) / 2

    slots = []
    for row in range(rows):
        for col in range(cols):
            slots.append(PhotoSlot(
                id=row * cols + col + 1,
                x=left + col * (size.width + col_gap),
                y=top + row * (size.height + row_gap),
                width=size.width,
                height=size.height,
            ))
    return slots


def _single(preset: FramePreset) -> List[PhotoSlot]:
    return _centered_block(preset.default_slot_size, cols=1, rows=1)


def _vertical(preset: FramePreset) -> List[PhotoSlot]:
    return _centered_block(preset.default_slot_size, cols=1, rows=2, row_gap=VERTICAL_GAP)


def _strip(preset: FramePreset) -> List[PhotoSlot]:
    return _centered_block(preset.default_slot_size, cols=1, rows=preset.photo_count, row_gap=STRIP_GAP)


def _grid(preset: FramePreset) -> List[PhotoSlot]:
    # Legacy 2x2 square grid, anchored top-left rather than centred. The top
    # offset shrinks below the gap so the second row ends inside the safe zone.
    side = (100 - 3 * GRID_GAP) / 2
    top = min(GRID_GAP, SAFE_ZONE - (2 * side + GRID_GAP))
    slots = []
    for row in range(2):
        for col in range(2):
            slots.append(PhotoSlot(
                id=row * 2 + col + 1,
                x=GRID_GAP + col * (side + GRID_GAP),
                y=top + row * (side + GRID_GAP),
                width=side,
                height=side,
            ))
    return slots


def _double_strip(preset: FramePreset) -> List[PhotoSlot]:
    return _centered_block(preset.default_slot_size, cols=2, rows=4,
                           col_gap=DOUBLE_STRIP_WIDE_GAP, row_gap=DOUBLE_STRIP_NARROW_GAP)


def _double_strip_landscape(preset: FramePreset) -> List[PhotoSlot]:
    return _centered_block(preset.default_slot_size, cols=4, rows=2,
                           col_gap=DOUBLE_STRIP_NARROW_GAP, row_gap=DOUBLE_STRIP_WIDE_GAP)


LAYOUT_GENERATORS: Dict[LayoutKind, Callable[[FramePreset], List[PhotoSlot]]] = {
    LayoutKind.single: _single,
    LayoutKind.vertical: _vertical,
    LayoutKind.strip: _strip,
    LayoutKind.grid: _grid,
    LayoutKind.double_strip: _double_strip,
    LayoutKind.double_strip_landscape: _double_strip_landscape,
}


def generate_default_slots(preset: FramePreset, width: float = 100.0, height: float = 100.0) -> List[PhotoSlot]:
    """Lay out ``preset.total_slots`` slots for the preset.

    With the default unit the result is in percent of the frame. Passing a
    canvas size returns the same rectangles in that canvas' pixels.
    """
    generator = LAYOUT_GENERATORS.get(preset.layout)
    if generator is None:
        raise UnsupportedLayoutError(f"No slot generator for layout '{preset.layout}'")
    return scale_slots(generator(preset), width, height)


def scale_slots(slots: Sequence[PhotoSlot], width: float, height: float) -> List[PhotoSlot]:
    """Convert percent slots to a ``width`` x ``height`` unit space."""
    if width == 100 and height == 100:
        return [slot.model_copy() for slot in slots]
    sx = width / 100
    sy = height / 100
    return [
        slot.model_copy(update={
            "x": slot.x * sx,
            "y": slot.y * sy,
            "width": slot.width * sx,
            "height": slot.height * sy,
        })
        for slot in slots
    ]


def photo_sequence(layout: LayoutKind, photo_total: int) -> List[int]:
    """Index of the source photo drawn into each slot, in slot order."""
    if layout.is_double_strip and photo_total != DOUBLE_STRIP_PHOTOS:
        raise UnsupportedLayoutError(
            f"Layout '{layout.value}' needs exactly {DOUBLE_STRIP_PHOTOS} photos, got {photo_total}"
        )
    if layout == LayoutKind.double_strip:
        # Each photo fills both columns of its row: two identical strips.
        return [index for index in range(DOUBLE_STRIP_PHOTOS) for _ in range(2)]
    if layout == LayoutKind.double_strip_landscape:
        return list(range(DOUBLE_STRIP_PHOTOS)) * 2
    return list(range(photo_total))
