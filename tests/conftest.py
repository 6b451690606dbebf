"""Shared test fixtures."""

import base64
import io

import pytest
from PIL import Image

RED = (220, 30, 30)


def _encode(image: Image.Image, fmt: str) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def make_image_bytes():
    def _make(size=(400, 300), color=RED, mode="RGB", fmt="PNG") -> bytes:
        return _encode(Image.new(mode, size, color), fmt)

    return _make


@pytest.fixture
def to_data_uri():
    def _to(image: Image.Image, fmt: str = "PNG") -> str:
        encoded = base64.b64encode(_encode(image, fmt)).decode("utf-8")
        return f"data:image/{fmt.lower()};base64,{encoded}"

    return _to


@pytest.fixture
def make_data_uri(to_data_uri):
    def _make(size=(400, 300), color=RED, mode="RGB", fmt="PNG") -> str:
        return to_data_uri(Image.new(mode, size, color), fmt)

    return _make


@pytest.fixture
def transparent_frame(make_data_uri):
    def _make(width: int, height: int) -> str:
        return make_data_uri((width, height), (0, 0, 0, 0), mode="RGBA")

    return _make


@pytest.fixture
def decode():
    def _decode(data: bytes) -> Image.Image:
        image = Image.open(io.BytesIO(data))
        image.load()
        return image

    return _decode


def close_to(pixel, expected, tolerance: int = 40) -> bool:
    return all(abs(a - b) <= tolerance for a, b in zip(pixel, expected))


@pytest.fixture
def assert_color():
    def _assert(image: Image.Image, point, expected, tolerance: int = 40) -> None:
        pixel = image.convert("RGB").getpixel((round(point[0]), round(point[1])))
        assert close_to(pixel, expected, tolerance), f"{pixel} at {point} is not close to {expected}"

    return _assert
