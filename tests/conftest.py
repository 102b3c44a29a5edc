import io

import pytest
from PIL import Image

from bitmap_utility.imagecodec import ImageCodec


class StubCodec(ImageCodec):
    """Records writes instead of decoding images."""

    def __init__(self):
        self.written = {}

    def image_file_to_bytes(self, path):
        with open(path, "rb") as f:
            return f.read()

    def bytes_to_image_file(self, data, path):
        self.written[path] = data
        with open(path, "wb") as f:
            f.write(data)


@pytest.fixture
def stub_codec():
    return StubCodec()


def make_image_bytes(fmt="BMP", size=(3, 2), color=(255, 0, 0)):
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def bmp_bytes():
    return make_image_bytes("BMP")


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")
