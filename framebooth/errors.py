"""Errors raised while laying out and compositing frames."""


class CompositionError(Exception):
    """Base class for composition engine failures."""


class AssetLoadError(CompositionError):
    """A frame or photo could not be fetched or decoded."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"Failed to load asset '{describe_source(source)}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedLayoutError(CompositionError):
    """The requested layout cannot be rendered with the given photos."""


class RenderContextUnavailable(CompositionError):
    """No raster canvas could be allocated for the render."""


class PhotoLoadWarning(UserWarning):
    """A single photo failed to load; its slot stays background-filled."""

    def __init__(self, index: int, source: str, reason: str = ""):
        self.index = index
        self.source = source
        self.reason = reason
        super().__init__(f"Photo {index} could not be loaded from '{describe_source(source)}': {reason}")


def describe_source(source: str, limit: int = 70) -> str:
    # data URIs can be megabytes long
    if len(source) <= limit:
        return source
    return f"{source[:limit]}..."
