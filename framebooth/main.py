from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from framebooth.app_logging import configure_logging
from framebooth.config import settings
from framebooth.api.routes import composite, presets, slots
from framebooth.services.presets import get_all_presets

configure_logging()

app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(presets.router, prefix="/api")
app.include_router(slots.router, prefix="/api")
app.include_router(composite.router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "presets": len(get_all_presets())}
