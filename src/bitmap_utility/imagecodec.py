import abc
import io

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError

CHUNK_SIZE = 100


class ImageCodec(abc.ABC):
    """Boundary between the code-file logic and an actual image library."""

    @abc.abstractmethod
    def image_file_to_bytes(self, path):
        pass

    @abc.abstractmethod
    def bytes_to_image_file(self, data, path):
        pass


class PillowCodec(ImageCodec):

    def image_file_to_bytes(self, path):
        # The code file stores the encoded file, so no pixel decoding here
        chunks = []
        with open(path, "rb") as f:
            while True:
                chunk = f.read(CHUNK_SIZE)
                if not chunk:
                    break
                chunks.append(chunk)
        return b"".join(chunks)

    def bytes_to_image_file(self, data, path):
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise ImageDecodeError(f"Cannot decode image for {path}: {e}") from e

        with img:
            # Keep the source format; pixel content is not converted
            if (img.format or "").upper() not in Image.SAVE:
                raise ImageDecodeError(
                    f"Cannot write image for {path}: no encoder for {img.format} format")
            img.save(path, format=img.format)
