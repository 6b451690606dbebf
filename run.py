import logging

import uvicorn
from framebooth.main import app
from framebooth.config import settings

logger = logging.getLogger("framebooth")

if __name__ == "__main__":
    logger.info("Starting %s on http://%s:%s", settings.app_name, settings.host, settings.port)
    logger.info("Composites are encoded as JPEG at quality %s", settings.jpeg_quality)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
