from fastapi import APIRouter, HTTPException

from framebooth.models.composite import NormalizeRequest, NormalizeResponse
from framebooth.services.normalizer import normalize

router = APIRouter(prefix="/slots", tags=["slots"])


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_slot(request: NormalizeRequest):
    try:
        slot = normalize(
            request.slot,
            request.target_ratio,
            request.frame_width_cm,
            request.frame_height_cm,
            tolerance=request.tolerance,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return NormalizeResponse(slot=slot, changed=slot.height != request.slot.height)
