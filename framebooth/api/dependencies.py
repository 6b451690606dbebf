from framebooth.services.compositor import compositor
from framebooth.services.fallback import fallback_compositor

def get_compositor():
    return compositor

def get_fallback_compositor():
    return fallback_compositor
