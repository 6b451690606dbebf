"""Compiled-in physical paper presets.

Keys 1-4 match the number of photos captured for the preset. Keys 5 and 6 are
the 4R double strips, which also take four photos but print each one twice.
"""
from types import MappingProxyType
from typing import List, Optional

from framebooth.errors import UnsupportedLayoutError
from framebooth.models.frame import FrameConfig, FramePreset, LayoutKind, SlotSize


def _preset(key: int, photo_count: int, layout: LayoutKind, paper: tuple, slot: tuple,
            name: str, description: str, slot_count: Optional[int] = None) -> FramePreset:
    paper_width, paper_height = paper
    return FramePreset(
        id=key,
        photo_count=photo_count,
        slot_count=slot_count,
        layout=layout,
        aspect_ratio=paper_width / paper_height,
        default_slot_size=SlotSize(width=slot[0], height=slot[1]),
        name=name,
        description=description,
        paper_width_cm=paper_width,
        paper_height_cm=paper_height,
    )


FRAME_PRESETS = MappingProxyType({
    1: _preset(1, 1, LayoutKind.single, (13, 9), (84, 80),
               "1 Photo (Landscape Card)", "Single photo on a 13x9 cm landscape card"),
    2: _preset(2, 2, LayoutKind.vertical, (5, 10), (90, 40),
               "2 Photos (Short Strip)", "Two photos stacked on a 5x10 cm strip"),
    3: _preset(3, 3, LayoutKind.strip, (5, 15), (90, 26),
               "3 Photos (Classic Strip)", "Three photos on a 5x15 cm strip"),
    4: _preset(4, 4, LayoutKind.strip, (5, 18.5), (90, 20),
               "4 Photos (Long Strip)", "Four photos on a 5x18.5 cm strip"),
    5: _preset(5, 4, LayoutKind.double_strip, (10.2, 15.2), (44, 21),
               "4R Double Strip (Portrait)", "Two identical four-photo strips side by side on 4R paper",
               slot_count=8),
    6: _preset(6, 4, LayoutKind.double_strip_landscape, (15.2, 10.2), (21, 44),
               "4R Double Strip (Landscape)", "Two identical four-photo rows on landscape 4R paper",
               slot_count=8),
})


def get_preset(key: int) -> Optional[FramePreset]:
    return FRAME_PRESETS.get(key)


def get_all_presets() -> List[FramePreset]:
    return [FRAME_PRESETS[key] for key in sorted(FRAME_PRESETS)]


def preset_for_count(photo_count: int) -> Optional[FramePreset]:
    """Regular preset capturing ``photo_count`` photos, ignoring the double strips."""
    for preset in get_all_presets():
        if preset.slot_count is None and preset.photo_count == photo_count:
            return preset
    return None


def preset_for_render(photo_count: Optional[int], frame_config: Optional[FrameConfig] = None) -> FramePreset:
    """Pick the preset whose geometry drives a render.

    A persisted frame config wins over the bare photo count so that double
    strips, which share a photo count with the long strip, resolve correctly.
    Without one, only the regular presets are considered.
    """
    if frame_config is not None:
        return frame_config.to_preset()
    preset = preset_for_count(photo_count) if photo_count is not None else None
    if preset is None:
        raise UnsupportedLayoutError(f"No frame preset for {photo_count} photos")
    return preset
