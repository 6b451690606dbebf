from typing import List, Optional

from pydantic import BaseModel, Field

from framebooth.models.frame import FrameConfig, FramePreset, LayoutKind, PhotoSlot


class CompositeRequest(BaseModel):
    photos: List[str] = Field(min_length=1, max_length=4)
    frame: str
    slots: Optional[List[PhotoSlot]] = None
    photo_count: Optional[int] = Field(default=None, ge=1, le=4)
    frame_config: Optional[FrameConfig] = None


class OverlayRequest(BaseModel):
    photo: str
    frame: str


class CompositeResponse(BaseModel):
    success: bool
    width: int
    height: int
    composite: str
    warnings: List[str] = []
    fallback: bool = False


class NormalizeRequest(BaseModel):
    slot: PhotoSlot
    target_ratio: float = Field(gt=0)
    frame_width_cm: float = Field(gt=0)
    frame_height_cm: float = Field(gt=0)
    tolerance: Optional[float] = Field(default=None, ge=0)


class NormalizeResponse(BaseModel):
    slot: PhotoSlot
    changed: bool


class PresetResponse(BaseModel):
    id: int
    name: str
    description: str
    photo_count: int
    slot_count: int
    layout: LayoutKind
    aspect_ratio: float
    paper_width_cm: Optional[float]
    paper_height_cm: Optional[float]
    default_slots: List[PhotoSlot]

    @classmethod
    def from_preset(cls, preset: FramePreset, slots: List[PhotoSlot]) -> "PresetResponse":
        return cls(
            id=preset.id,
            name=preset.name,
            description=preset.description,
            photo_count=preset.photo_count,
            slot_count=preset.total_slots,
            layout=preset.layout,
            aspect_ratio=preset.aspect_ratio,
            paper_width_cm=preset.paper_width_cm,
            paper_height_cm=preset.paper_height_cm,
            default_slots=slots,
        )
