import os

from .codefile import read_code_file, write_code_file
from .errors import ArgumentError
from .imagecodec import PillowCodec


def _require_path(value, name):
    if value is None:
        raise ArgumentError("Value cannot be null.", name)
    if not str(value).strip():
        raise ArgumentError("Empty value.", name)


def create_bitmap_files(code_folder_path, output_folder_path, replace=False, codec=None):
    """Create a bitmap in ``output_folder_path`` for every code file in ``code_folder_path``.

    Each target is named after its code file with ``.bmp`` appended. Files
    without any byte values are skipped. Existing bitmaps are left alone
    unless ``replace`` is set. The first file that fails to parse or decode
    stops the whole run.

    Returns the list of bitmap paths that were written.
    """
    _require_path(code_folder_path, "code_folder_path")
    _require_path(output_folder_path, "output_folder_path")

    if not os.path.isdir(code_folder_path):
        raise ArgumentError("Folder does not exist.", "code_folder_path")

    codec = codec or PillowCodec()
    written = []

    for entry in sorted(os.scandir(code_folder_path), key=lambda e: e.name):
        if not entry.is_file():
            continue

        data = read_code_file(entry.path)
        if not data:
            continue

        target = os.path.join(output_folder_path, f"{entry.name}.bmp")
        if replace or not os.path.exists(target):
            codec.bytes_to_image_file(data, target)
            written.append(target)
            print(f"Converted {entry.path} -> {target}")
        else:
            print(f"Skipped {target} (already exists)")

    return written


def create_code_file(bitmap_file_path, output_file_path, replace=False, codec=None):
    """Write the bytes of ``bitmap_file_path`` as a C array to ``output_file_path``.

    Returns the written path, or None if the target existed and ``replace``
    was not set.
    """
    _require_path(bitmap_file_path, "bitmap_file_path")
    _require_path(output_file_path, "output_file_path")

    if not os.path.isfile(bitmap_file_path):
        raise ArgumentError("File does not exist.", "bitmap_file_path")

    codec = codec or PillowCodec()
    data = codec.image_file_to_bytes(bitmap_file_path)

    if not replace and os.path.exists(output_file_path):
        print(f"Skipped {output_file_path} (already exists)")
        return None

    write_code_file(data, output_file_path)
    print(f"Converted {bitmap_file_path} -> {output_file_path}")
    return output_file_path
