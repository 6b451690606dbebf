from fastapi import APIRouter, HTTPException
from typing import List

from framebooth.models.composite import PresetResponse
from framebooth.models.frame import PhotoSlot
from framebooth.services.layout import generate_default_slots
from framebooth.services.presets import get_all_presets, get_preset

router = APIRouter(prefix="/presets", tags=["presets"])


def _get_or_404(key: int):
    preset = get_preset(key)
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset {key} not found")
    return preset


@router.get("/", response_model=List[PresetResponse])
async def list_presets():
    return [PresetResponse.from_preset(p, generate_default_slots(p)) for p in get_all_presets()]


@router.get("/{key}", response_model=PresetResponse)
async def read_preset(key: int):
    preset = _get_or_404(key)
    return PresetResponse.from_preset(preset, generate_default_slots(preset))


@router.get("/{key}/slots", response_model=List[PhotoSlot])
async def default_slots(key: int):
    return generate_default_slots(_get_or_404(key))
