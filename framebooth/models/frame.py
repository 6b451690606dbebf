import base64
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from framebooth.errors import PhotoLoadWarning


class LayoutKind(str, Enum):
    single = "single"
    vertical = "vertical"
    strip = "strip"
    grid = "grid"
    double_strip = "double_strip"
    double_strip_landscape = "double_strip_landscape"

    @property
    def is_double_strip(self) -> bool:
        return self in (LayoutKind.double_strip, LayoutKind.double_strip_landscape)


DOUBLE_STRIP_SLOT_COUNT = 8


class SlotSize(BaseModel):
    width: float = Field(gt=0, le=100)
    height: float = Field(gt=0, le=100)

    class Config:
        frozen = True


class PhotoSlot(BaseModel):
    """A rectangle reserved for one photo, in percent of the frame's pixel size.

    When produced by ``generate_default_slots`` with an explicit unit the same
    fields hold pixel values instead.
    """

    id: int
    x: float
    y: float
    width: float
    height: float
    radius: Optional[float] = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class FramePreset(BaseModel):
    id: int
    photo_count: int = Field(ge=1, le=4)
    slot_count: Optional[int] = None
    layout: LayoutKind
    aspect_ratio: float
    default_slot_size: SlotSize
    name: str = ""
    description: str = ""
    paper_width_cm: Optional[float] = None
    paper_height_cm: Optional[float] = None

    class Config:
        frozen = True

    @property
    def total_slots(self) -> int:
        return self.slot_count or self.photo_count


class FrameConfig(BaseModel):
    """Preset configuration persisted alongside a frame asset."""

    photo_count: int = Field(ge=1, le=4)
    layout: LayoutKind
    aspect_ratio: float
    default_slot_size: SlotSize

    @classmethod
    def from_preset(cls, preset: FramePreset) -> "FrameConfig":
        return cls(
            photo_count=preset.photo_count,
            layout=preset.layout,
            aspect_ratio=preset.aspect_ratio,
            default_slot_size=preset.default_slot_size,
        )

    def to_preset(self) -> FramePreset:
        slot_count = DOUBLE_STRIP_SLOT_COUNT if self.layout.is_double_strip else None
        return FramePreset(
            id=0,
            photo_count=self.photo_count,
            slot_count=slot_count,
            layout=self.layout,
            aspect_ratio=self.aspect_ratio,
            default_slot_size=self.default_slot_size,
            name="Custom frame",
        )


class CompositeResult(BaseModel):
    data: bytes
    width: int
    height: int
    media_type: str = "image/jpeg"
    warnings: List[PhotoLoadWarning] = []

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("utf-8")

    def to_data_uri(self) -> str:
        return f"data:{self.media_type};base64,{self.to_base64()}"
