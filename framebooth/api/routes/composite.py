from fastapi import APIRouter, Depends, HTTPException
import logging

from framebooth.errors import AssetLoadError, RenderContextUnavailable, UnsupportedLayoutError
from framebooth.models.composite import CompositeRequest, CompositeResponse, OverlayRequest
from framebooth.models.frame import CompositeResult
from framebooth.services.compositor import Compositor
from framebooth.services.fallback import SimpleCompositor, overlay_frame
from framebooth.api.dependencies import get_compositor, get_fallback_compositor

router = APIRouter(prefix="/composite", tags=["composite"])
logger = logging.getLogger(__name__)


def _response(result: CompositeResult, fallback: bool = False) -> CompositeResponse:
    return CompositeResponse(
        success=True,
        width=result.width,
        height=result.height,
        composite=result.to_data_uri(),
        warnings=[str(w) for w in result.warnings],
        fallback=fallback,
    )


@router.post("", response_model=CompositeResponse)
async def create_composite(
        request: CompositeRequest,
        compositor: Compositor = Depends(get_compositor),
        fallback_compositor: SimpleCompositor = Depends(get_fallback_compositor)
):
    try:
        result = await compositor.composite(
            request.photos,
            request.frame,
            slots=request.slots,
            photo_count=request.photo_count,
            frame_config=request.frame_config,
        )
        return _response(result)
    except UnsupportedLayoutError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (AssetLoadError, RenderContextUnavailable) as e:
        logger.warning("Layout composite failed (%s), trying fallback compositor", e)

    try:
        result = await fallback_compositor.composite(request.photos, request.frame)
    except (AssetLoadError, RenderContextUnavailable) as e:
        logger.error("Fallback composite failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    return _response(result, fallback=True)


@router.post("/overlay", response_model=CompositeResponse)
async def create_overlay(request: OverlayRequest):
    try:
        result = await overlay_frame(request.photo, request.frame)
    except (AssetLoadError, RenderContextUnavailable) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _response(result)
